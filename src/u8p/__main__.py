from .cli.main import app

app(prog_name="u8p")
