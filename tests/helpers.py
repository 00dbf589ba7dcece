import json
from unittest import mock

import requests


def make_response(body=b"", status=200, url="https://api.example.test/x"):
    """A real `requests.Response` with a canned body."""
    if not isinstance(body, (bytes, str)):
        body = json.dumps(body)
    if isinstance(body, str):
        body = body.encode("utf-8")
    resp = requests.Response()
    resp.status_code = status
    resp._content = body
    resp.url = url
    return resp


def fake_session(*responses, error=None):
    """Session mock whose `.get` returns *responses* in turn (or raises *error*)."""
    session = mock.create_autospec(requests.Session, instance=True)
    if error is not None:
        session.get.side_effect = error
    elif len(responses) == 1:
        session.get.return_value = responses[0]
    else:
        session.get.side_effect = list(responses)
    return session


def movie_json(mid=1, title="Dune", **overrides):
    data = {
        "id": mid,
        "title": title,
        "overview": f"{title} overview",
        "poster_path": f"/poster{mid}.jpg",
        "backdrop_path": f"/backdrop{mid}.jpg",
        "vote_average": 7.5,
        "release_date": "2021-10-22",
        "popularity": 99.1,
    }
    data.update(overrides)
    return data


def series_json(sid=10, name="Severance", **overrides):
    data = {
        "id": sid,
        "name": name,
        "overview": f"{name} overview",
        "poster_path": None,
        "backdrop_path": f"/tv{sid}.jpg",
        "vote_average": 8,
        "first_air_date": "2022-02-18",
    }
    data.update(overrides)
    return data
