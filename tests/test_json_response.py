import json

from chaosworkshop import json_response


def test_empty_response():
    assert json_response.formulate().dumps() == "{}"


def test_success_body():
    assert json_response.formulate_success().dumps() == '{"success":true}'


def test_failure_body():
    body = json_response.formulate_failure("Missing name").dumps()
    assert json.loads(body) == {"success": False, "reason": "Missing name"}


def test_set_chains_on_same_object():
    response = json_response.formulate()
    assert response.set("a", 1) is response
    assert response.data == {"a": 1}


def test_keys_are_sorted():
    body = json_response.formulate().set("zeta", 1).set("alpha", 2).dumps()
    assert body.index('"alpha"') < body.index('"zeta"')


def test_str_matches_dumps():
    response = json_response.formulate_success().set("submission_id", "0123456789abcdef")
    assert str(response) == response.dumps()
    assert json.loads(str(response))["submission_id"] == "0123456789abcdef"


def test_non_ascii_is_kept():
    body = json_response.formulate_failure("héllo").dumps()
    assert "héllo" in body


def test_nested_values_round_trip():
    nested = {"x": {"name": "n", "lastupdated": 5}}
    body = json_response.formulate_success().set("submissions", nested).dumps()
    assert json.loads(body)["submissions"] == nested