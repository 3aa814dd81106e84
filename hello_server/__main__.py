from hello_server.main import run_server

run_server()
