from starter_api.main import run

run()
