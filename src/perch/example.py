"""Example application served by ``perch run`` when no app is given."""

from dataclasses import dataclass

from perch.app import App
from perch.config import AppConfig
from perch.errors import ParameterError
from perch.templating.integration import read_default

app = App(
    AppConfig(
        title="My App",
        version="0.1",
        about="Simple framework for making Python webapps",
    )
)


@dataclass(frozen=True, slots=True)
class Greeting:
    name: str
    excited: bool = False


app.add_template(
    "greeting.html",
    "<p>Hello, {{ name }}!</p>",
)

app.add_static("", "Index", read_default("index.html").encode("utf-8"))


@app.translator("hello/:name", title="Hello", template="greeting.html")
def hello(name: str) -> Greeting:
    if not name.strip():
        raise ParameterError("missing name")
    return Greeting(name=name)


@app.json("api/hello/:name")
def hello_json(name: str) -> Greeting:
    if not name.strip():
        raise ParameterError("missing name")
    return Greeting(name=name, excited=name.isupper())
