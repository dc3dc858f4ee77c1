from osprobe.cli import app

app(prog_name="osprobe")
