"""Hello — the smallest useful wren app.

Demonstrates literal and variable routes, the implicit HEAD route,
JSON and text responses, body negotiation, the sitemap, and the JSON
error envelope for a failing handler.

Run:
    python app.py
"""

from wren import App, FormParser, JSONParser, PlainTextParser

app = App([FormParser(), JSONParser(), PlainTextParser()])


@app.get("/")
def index(request, response, params):
    msg = "foo"
    raise RuntimeError(msg)


@app.get("/ping")
def ping(request, response, params):
    response.with_status(200).with_text("pong!").end()


@app.get("/sitemap.json")
def sitemap(request, response, params):
    response.with_status(200).with_json(app.sitemap()).end()


@app.post("/echo")
def echo(request, response, params):
    response.with_status(200).with_json(
        {"headers": request.headers.to_dict(), "payload": request.body}
    ).end()


@app.get("/{name}")
def greet(request, response, params):
    response.with_status(200).with_text(f"Hello, {params['name']}!").end()


if __name__ == "__main__":
    app.run()
