from config import API_BASE, MAX_POKEMON_ID, MSG_INVALID_ID

# ===============================================
# ERROR TAXONOMY
# ===============================================

class FetchError(Exception):
    """Base for every failure surfaced on the status line."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidIdentifier(FetchError):
    def __init__(self, target_id, max_id: int):
        super().__init__(MSG_INVALID_ID)
        self.target_id = target_id
        self.max_id = max_id


class HttpError(FetchError):
    def __init__(self, status: int):
        super().__init__(f"HTTP {status}")
        self.status = status


class NetworkOrParseError(FetchError):
    def __init__(self, cause: Exception):
        super().__init__(str(cause) or cause.__class__.__name__)
        self.cause = cause


# ===============================================
# GATEWAY
# ===============================================

class FetchGateway:
    """
    One GET per navigation against API_BASE/{id}.
    `fetch` has the shape of pyodide.http.pyfetch: awaitable, returning an
    object with .ok, .status and an async .json().
    """

    def __init__(self, base_url: str = API_BASE, max_id: int = MAX_POKEMON_ID, fetch=None):
        self.base_url = base_url.rstrip("/")
        self.max_id = max_id
        self._fetch = fetch

    def url_for(self, target_id: int) -> str:
        return f"{self.base_url}/{target_id}"

    def validate(self, target_id):
        if isinstance(target_id, bool) or not isinstance(target_id, int):
            raise InvalidIdentifier(target_id, self.max_id)
        if target_id < 1 or target_id > self.max_id:
            raise InvalidIdentifier(target_id, self.max_id)

    def _get_fetch(self):
        if self._fetch is None:
            # Only resolvable inside the Pyodide runtime
            from pyodide.http import pyfetch
            self._fetch = pyfetch
        return self._fetch

    async def fetch_record(self, target_id: int) -> dict:
        self.validate(target_id)
        fetch = self._get_fetch()
        url = self.url_for(target_id)

        print(f"LOG: GET {url}")
        try:
            response = await fetch(url)
        except Exception as e:
            raise NetworkOrParseError(e) from e

        if not response.ok:
            raise HttpError(response.status)

        try:
            data = await response.json()
        except Exception as e:
            raise NetworkOrParseError(e) from e

        if not isinstance(data, dict):
            raise NetworkOrParseError(ValueError(f"expected a JSON object, got {type(data).__name__}"))
        return data
