import pytest

from smppkit.commands import CommandId, CommandStatus

_PAIRS = [
    (0x00000001, -2147483647),
    (0x00000002, -2147483646),
    (0x00000003, -2147483645),
    (0x00000004, -2147483644),
    (0x00000005, -2147483643),
    (0x00000006, -2147483642),
    (0x00000007, -2147483641),
    (0x00000008, -2147483640),
    (0x00000009, -2147483639),
    (0x00000015, -2147483627),
    (0x00000021, -2147483615),
    (0x00000103, -2147483389),
]

_GENERIC_NACK_VALUE = -2147483648


@pytest.mark.parametrize("request_value, response_value", _PAIRS)
def test_response_flags(request_value, response_value):
    assert CommandId(request_value).is_response() is False
    assert CommandId(response_value).is_response() is True


@pytest.mark.parametrize("request_value, response_value", _PAIRS)
def test_response_id_sets_high_bit_of_request(request_value, response_value):
    request_id = CommandId(request_value)
    response_id = CommandId(response_value)
    nack = CommandId(_GENERIC_NACK_VALUE)
    assert response_id.value == request_id.value | nack.value
    assert response_id.value & ~nack.value == request_id.value


def test_generic_nack_is_response():
    assert CommandId.GENERIC_NACK.is_response()


@pytest.mark.parametrize(
    "request_only",
    [CommandId.OUTBIND, CommandId.ALERT_NOTIFICATION],
)
def test_request_only_commands_are_not_responses(request_only):
    assert request_only.is_response() is False


@pytest.mark.parametrize(
    "signed, expected",
    [
        (-2147483648, CommandId.GENERIC_NACK),
        (-2147483647, CommandId.BIND_RECEIVER_RESP),
        (-2147483644, CommandId.SUBMIT_SM_RESP),
        (-2147483627, CommandId.ENQUIRE_LINK_RESP),
        (-2147483615, CommandId.SUBMIT_MULTI_RESP),
        (-2147483389, CommandId.DATA_SM_RESP),
    ],
)
def test_signed_command_ids_are_accepted(signed, expected):
    assert CommandId(signed) is expected


@pytest.mark.parametrize("member", list(CommandId))
def test_command_id_round_trip(member):
    assert CommandId(int(member)) is member


def test_unknown_command_id_raises():
    with pytest.raises(ValueError):
        CommandId(0x7FFFFFFF)


def test_command_id_str_is_name():
    assert str(CommandId(0x00000004)) == "SUBMIT_SM"


def test_command_status_values_from_protocol():
    assert CommandStatus.ESME_ROK == 0
    assert CommandStatus(0x0000000F) is CommandStatus.ESME_RINVSYSID
    assert CommandStatus(0x0000012C) is CommandStatus.ESME_LAST_ERROR


def test_command_status_description():
    assert CommandStatus(0x0000000F).description == "Invalid System ID"
    assert CommandStatus(0x00000000).description == "No Error"
    assert CommandStatus(0x000000FF).description == "Unknown Error"


@pytest.mark.parametrize("value", [int(s) for s in CommandStatus])
def test_every_status_has_description(value):
    description = CommandStatus(value).description
    assert isinstance(description, str)
    assert len(description) > 0


def test_command_status_str_is_name():
    assert str(CommandStatus(0x00000058)) == "ESME_RTHROTTLED"


def test_unknown_command_status_raises():
    with pytest.raises(ValueError):
        CommandStatus(0x00000009)