"""HTTP client for the codeprobs API."""

from typing import List, Optional

import requests

from .models import Answer, AnswerError, Credentials, User
from .outcomes import Outcome, classify_answer_post, classify_delete, classify_signup
from ..errors import ApiError
from ..utils.terminal import err_console


class CodeprobsClient:
    """
    HTTP client for the codeprobs API.

    Every public method issues exactly one request. Transport failures and
    undecodable responses raise ApiError; write operations return an
    Outcome describing what the server decided.
    """

    def __init__(
        self,
        base_url: str,
        session: Optional[requests.Session] = None,
        debug: bool = False,
    ):
        """Initialize the client."""
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.debug = debug

    def _request(self, method: str, path: str, **kwargs) -> requests.Response:
        """Send one request. Auth is passed through but never printed."""
        url = f"{self.base_url}{path}"
        if self.debug:
            err_console.print(f"[cyan]DEBUG: {method} {url}[/cyan]")

        try:
            response = self.session.request(method, url, **kwargs)
        except requests.RequestException as e:
            raise ApiError(f"Request to {url} failed: {e}") from e

        if self.debug:
            err_console.print(f"[cyan]DEBUG: HTTP {response.status_code}[/cyan]")
        return response

    def _get_json(self, path: str):
        """GET a JSON document, treating any non-2xx status as fatal."""
        response = self._request("GET", path)
        try:
            response.raise_for_status()
        except requests.HTTPError as e:
            raise ApiError(f"Server error: {e}") from e
        return self._decode(response)

    @staticmethod
    def _decode(response: requests.Response):
        try:
            return response.json()
        except ValueError as e:
            raise ApiError(f"Malformed response from server: {e}") from e

    def get_users(self) -> List[User]:
        """Fetch the leaderboard."""
        data = self._get_json("/user")
        try:
            return [User.from_dict(u) for u in data]
        except (KeyError, TypeError) as e:
            raise ApiError(f"Malformed user list from server: {e!r}") from e

    def sign_up(self, credentials: Credentials) -> Outcome:
        """Create a user."""
        response = self._request("POST", "/user", json=credentials.as_signup_body())
        return classify_signup(response.status_code, response.text)

    def get_answers(self, problem_id: int) -> List[Answer]:
        """Fetch all answers to a problem."""
        data = self._get_json(f"/answer/{problem_id}")
        try:
            return [Answer.from_dict(a) for a in data]
        except (KeyError, TypeError) as e:
            raise ApiError(f"Malformed answer list from server: {e!r}") from e

    def post_answer(
        self,
        problem_id: int,
        language: str,
        content: str,
        credentials: Credentials,
    ) -> Outcome:
        """Submit an answer to a problem."""
        response = self._request(
            "POST",
            f"/answer/{problem_id}",
            json={"language": language, "content": content},
            auth=credentials.as_auth(),
        )

        error = None
        if response.status_code == 422:
            data = self._decode(response)
            try:
                error = AnswerError.from_dict(data)
            except (KeyError, TypeError, AttributeError) as e:
                raise ApiError(f"Malformed answer error from server: {e!r}") from e

        return classify_answer_post(response.status_code, response.text, error)

    def delete_answer(self, answer_id: int, credentials: Credentials) -> Outcome:
        """Delete one of your answers."""
        response = self._request(
            "DELETE", f"/answer/{answer_id}", auth=credentials.as_auth()
        )
        return classify_delete(response.status_code)
