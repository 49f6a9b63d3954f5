from mensar.cli import run

run()
