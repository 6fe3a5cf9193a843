import pytest

from ws_ts_gen.pipeline.analyzer import NameResolver, identifiers_for
from ws_ts_gen.pipeline.errors import IdentifierCollisionError, InvalidMessageNameError
from ws_ts_gen.utils import capitalize, to_type_name, ts_literal, ts_property_key, ts_string


def test_identifiers_for_simple_name():
    ids = identifiers_for("ping")

    assert ids.type_name == "Ping"
    assert ids.handler_interface == "PingHandler"
    assert ids.default_handler == "DefaultPingHandler"
    assert ids.register_method == "registerPing"
    assert ids.listener_method == "onPing"
    assert ids.send_method == "sendPing"
    assert ids.local_name == "pingHandler"


def test_identifiers_keep_inner_case():
    ids = identifiers_for("userJoined")

    assert ids.type_name == "UserJoined"
    assert ids.register_method == "registerUserJoined"
    assert ids.local_name == "userJoinedHandler"


def test_resolver_caches_identifiers():
    names = NameResolver()

    assert names.get("ping") is names.get("ping")
    assert list(names.resolve_names(["ping", "pong", "ping"])) == ["ping", "pong"]


def test_collision_between_case_variants():
    names = NameResolver()

    with pytest.raises(IdentifierCollisionError) as exc_info:
        names.resolve_names(["ping", "Ping"])
    assert exc_info.value.identifier == "Ping"
    assert exc_info.value.names == ("ping", "Ping")


@pytest.mark.parametrize("text, expected", [("ping", "Ping"), ("Ping", "Ping"), ("p", "P"), ("", "")])
def test_capitalize(text, expected):
    assert capitalize(text) == expected


def test_typescript_literals():
    assert ts_string("it's") == "'it\\'s'"
    assert ts_literal("ping") == "'ping'"
    assert ts_literal(3) == "3"
    assert ts_literal(True) == "true"
    assert ts_property_key("roomId") == "roomId"
    assert ts_property_key("content-type") == "'content-type'"


def test_separators_become_word_boundaries():
    ids = identifiers_for("user-joined")

    assert ids.type_name == "UserJoined"
    assert ids.handler_interface == "UserJoinedHandler"
    assert ids.register_method == "registerUserJoined"
    assert ids.local_name == "userJoinedHandler"
    assert ids.message_name == "user-joined"


@pytest.mark.parametrize("text, expected", [("room.message", "RoomMessage"), ("a b", "AB"), ("snake_case", "Snake_case")])
def test_to_type_name(text, expected):
    assert to_type_name(text) == expected


@pytest.mark.parametrize("name", ["200", "-", "", "9lives"])
def test_name_without_identifier_form(name):
    with pytest.raises(InvalidMessageNameError) as exc_info:
        identifiers_for(name)
    assert exc_info.value.message_name == name


def test_collision_after_separator_mapping():
    with pytest.raises(IdentifierCollisionError) as exc_info:
        NameResolver().resolve_names(["userJoined", "user-joined"])
    assert exc_info.value.identifier == "UserJoined"
