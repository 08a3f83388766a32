"""Entrypoint that reads PORT from the environment and starts the server."""
from tickboard.server import serve

if __name__ == "__main__":
    serve()
