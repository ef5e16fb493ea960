from record_spine.cli import app

app()
