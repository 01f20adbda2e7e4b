from tabtree.cli import app

app()
