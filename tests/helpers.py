import asyncio
from typing import Optional


def make_payload(pid=1, name="bulbasaur", types=("grass",), stats=(45, 49, 49),
                 artwork="https://img.example/artwork/1.png", sprite="https://img.example/sprite/1.png"):
    stat_names = ("hp", "attack", "defense", "special-attack", "special-defense", "speed")
    return {
        "id": pid,
        "name": name,
        "types": [{"slot": i + 1, "type": {"name": t, "url": ""}} for i, t in enumerate(types)],
        "stats": [{"base_stat": v, "effort": 0, "stat": {"name": stat_names[i], "url": ""}}
                  for i, v in enumerate(stats)],
        "sprites": {
            "front_default": sprite,
            "other": {"official-artwork": {"front_default": artwork}},
        },
    }


class FakeResponse:
    """Stands in for pyodide's FetchResponse: .ok, .status, async .json()."""

    def __init__(self, body=None, status=200):
        self.body = body
        self.status = status
        self.ok = 200 <= status < 300

    async def json(self):
        if isinstance(self.body, Exception):
            raise self.body
        return self.body


class FakeFetch:
    """
    Awaitable fetch(url). Responses are looked up by trailing id; an Exception
    value is raised instead. When `gate` is set, every call waits on it.
    """

    def __init__(self, responses=None, default=None, gate: Optional[asyncio.Event] = None):
        self.responses = responses or {}
        self.default = default
        self.gate = gate
        self.calls = []

    async def __call__(self, url):
        self.calls.append(url)
        if self.gate is not None:
            await self.gate.wait()
        key = int(url.rsplit("/", 1)[1])
        result = self.responses.get(key, self.default)
        if result is None:
            result = FakeResponse(make_payload(pid=key, name=f"mon{key}"))
        if isinstance(result, Exception):
            raise result
        return result


class RecordingView:
    def __init__(self):
        self.applied = []
        self.status = None
        self.controls_enabled = True
        self.control_history = []

    @property
    def last(self):
        return self.applied[-1] if self.applied else None

    def apply(self, description):
        self.applied.append(description)

    def show_status(self, message, kind):
        self.status = (message, kind)

    def hide_status(self):
        self.status = None

    def set_controls_enabled(self, enabled):
        self.controls_enabled = enabled
        self.control_history.append(enabled)


class FakeClassList:
    def __init__(self, classes=()):
        self._classes = list(classes)

    def add(self, *names):
        for name in names:
            if name not in self._classes:
                self._classes.append(name)

    def remove(self, *names):
        self._classes = [c for c in self._classes if c not in names]

    def contains(self, name):
        return name in self._classes


class FakeStyle:
    def __init__(self):
        self.width = ""
        self.color = ""


class FakeElement:
    """Just enough of a DOM element for dom_view.DomView."""

    def __init__(self, class_name=""):
        self.classList = FakeClassList(class_name.split())
        self.style = FakeStyle()
        self.textContent = ""
        self.src = ""
        self.alt = ""
        self.disabled = False

    @property
    def className(self):
        return " ".join(self.classList._classes)

    @className.setter
    def className(self, value):
        self.classList = FakeClassList(value.split())


class FakeDocument:
    def __init__(self, ids=(), missing=()):
        self.elements = {el_id: FakeElement() for el_id in ids if el_id not in missing}

    def getElementById(self, el_id):
        return self.elements.get(el_id)
