"Utility functions and classes for the tests."

import hashlib
import http.client
import socket
import threading

import flask
import werkzeug.serving

CHUNK_SIZE = 65536


def create_app():
    """Return a Flask app imitating the import endpoint of the database server.
    Each request received is recorded in the 'RECEIVED' list in the config.
    The body is hashed while read; it is kept only if 'KEEP_BODY' is set.
    """
    app = flask.Flask(__name__)
    app.config["STATUS"] = http.client.OK
    app.config["KEEP_BODY"] = True
    app.config["RECEIVED"] = []

    @app.route("/import", methods=["GET", "POST", "PUT"])
    def import_():
        digest = hashlib.sha256()
        size = 0
        body = bytearray()
        while True:
            chunk = flask.request.stream.read(CHUNK_SIZE)
            if not chunk:
                break
            digest.update(chunk)
            size += len(chunk)
            if app.config["KEEP_BODY"]:
                body.extend(chunk)
        authorization = flask.request.authorization
        app.config["RECEIVED"].append(
            dict(
                method=flask.request.method,
                path=flask.request.path,
                content_type=flask.request.headers.get("Content-Type"),
                username=authorization and authorization.username,
                password=authorization and authorization.password,
                size=size,
                sha256=digest.hexdigest(),
                body=bytes(body),
            )
        )
        return "Some response text that the client ignores.", app.config["STATUS"]

    return app


class Server:
    "Local HTTP server for the Flask app, running in a background thread."

    def __init__(self, app):
        self.app = app
        self.httpd = werkzeug.serving.make_server("127.0.0.1", 0, app)
        self.host = "127.0.0.1"
        self.port = str(self.httpd.server_port)
        self.thread = threading.Thread(target=self.httpd.serve_forever, daemon=True)

    def __enter__(self):
        self.thread.start()
        return self

    def __exit__(self, etyp, einst, etb):
        self.httpd.shutdown()
        self.httpd.server_close()
        self.thread.join()
        return False

    @property
    def received(self):
        return self.app.config["RECEIVED"]


def get_closed_port():
    "Return a local port number on which nothing is listening."
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.bind(("127.0.0.1", 0))
    port = sock.getsockname()[1]
    sock.close()
    return str(port)


def write_file(filepath, size, chunk_size=CHUNK_SIZE):
    """Write a file of the given size, filled with a repeated byte pattern.
    Return the SHA256 hex digest of the content.
    """
    digest = hashlib.sha256()
    block = bytes(range(256)) * (chunk_size // 256)
    written = 0
    with open(filepath, "wb") as outfile:
        while written < size:
            chunk = block[: min(chunk_size, size - written)]
            outfile.write(chunk)
            digest.update(chunk)
            written += len(chunk)
    return digest.hexdigest()
