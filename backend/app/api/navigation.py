"""Response Navigator - records the reporter's redirect request for the route to return.

Invariants:
    - At most one redirect target per request; the last call wins
    - Redirects use 303 See Other so browsers follow a form POST with a GET
"""

from fastapi import Response, status
from fastapi.responses import RedirectResponse


class ResponseNavigator:
    """Navigator protocol implementation bound to one HTTP request."""

    def __init__(self):
        self.location: str | None = None

    def redirect_to(self, path: str) -> None:
        self.location = path

    def to_response(self) -> Response:
        if self.location is None:
            return Response(status_code=status.HTTP_204_NO_CONTENT)
        return RedirectResponse(
            self.location, status_code=status.HTTP_303_SEE_OTHER,
        )
