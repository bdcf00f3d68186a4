import pytest

from tofkit.connections import ConnectionType


def test_declaration_order():
    names = [ConnectionType(index).name for index in range(4)]
    assert names == ["ON_TARGET", "USB", "NETWORK", "OFFLINE"]


@pytest.mark.parametrize("member", list(ConnectionType))
def test_round_trip_by_value_and_name(member):
    assert ConnectionType(member.value) is member
    assert ConnectionType[member.name] is member


def test_values_follow_declaration_order():
    members = [ConnectionType(index) for index in range(len(ConnectionType))]
    assert members == list(ConnectionType)
    assert [m.value for m in members] == list(range(len(ConnectionType)))


def test_unknown_value_rejected():
    with pytest.raises(ValueError):
        ConnectionType(len(ConnectionType))


def test_name_is_not_a_value():
    with pytest.raises(ValueError):
        ConnectionType("SERIAL")
    with pytest.raises(ValueError):
        ConnectionType("USB")