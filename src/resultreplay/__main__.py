from resultreplay.cli import app

app(prog_name="resultreplay")
