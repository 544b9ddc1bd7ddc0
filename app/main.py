from server import server

# Served by uvicorn: `uvicorn main:server_app`
server_app = server.handler
