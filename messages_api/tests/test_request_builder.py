import pytest
from pydantic import ValidationError

from messages_api.llm.codec import encode_count_tokens_params, encode_create_message_params
from messages_api.llm.schemas import (
    CreateMessageParams,
    Message,
    Metadata,
    RequiredMessageParams,
    Role,
    Tool,
    ToolChoiceAuto,
    ToolChoiceTool,
)


def _required() -> RequiredMessageParams:
    return RequiredMessageParams(
        model="claude-3",
        messages=[Message.new_text(Role.USER, "hi")],
        max_tokens=10,
    )


def test_required_params_serialize_to_exactly_three_keys():
    params = CreateMessageParams.from_required(_required())

    assert encode_create_message_params(params) == {
        "model": "claude-3",
        "messages": [{"role": "user", "content": "hi"}],
        "max_tokens": 10,
    }


def test_required_conversion_leaves_optionals_unset():
    params = _required().to_create_params()

    assert params.system is None
    assert params.temperature is None
    assert params.tools is None
    assert params.metadata is None


def test_builder_chain_sets_every_optional_field():
    tool = Tool(
        name="get_weather",
        description="Current weather for a city",
        input_schema={"type": "object", "properties": {"city": {"type": "string"}}},
    )
    params = (
        CreateMessageParams.from_required(_required())
        .with_system("Be brief.")
        .with_temperature(0.2)
        .with_stop_sequences(["\n\nHuman:"])
        .with_stream(False)
        .with_top_k(40)
        .with_top_p(0.95)
        .with_tools([tool])
        .with_tool_choice(ToolChoiceTool(name="get_weather"))
        .with_metadata({"user_id": "u-1"})
    )

    wire = encode_create_message_params(params)

    assert wire["system"] == "Be brief."
    assert wire["temperature"] == 0.2
    assert wire["stop_sequences"] == ["\n\nHuman:"]
    assert wire["stream"] is False
    assert wire["top_k"] == 40
    assert wire["top_p"] == 0.95
    assert wire["tools"] == [
        {
            "name": "get_weather",
            "description": "Current weather for a city",
            "input_schema": {"type": "object", "properties": {"city": {"type": "string"}}},
        }
    ]
    assert wire["tool_choice"] == {"type": "tool", "name": "get_weather"}
    assert wire["metadata"] == {"user_id": "u-1"}


def test_repeated_setter_keeps_last_value():
    params = (
        CreateMessageParams.from_required(_required())
        .with_temperature(0.5)
        .with_temperature(0.9)
    )

    assert params.temperature == 0.9
    assert encode_create_message_params(params)["temperature"] == 0.9


def test_setters_do_not_touch_the_original():
    base = CreateMessageParams.from_required(_required())
    configured = base.with_system("You are terse.").with_tool_choice(ToolChoiceAuto())

    assert base.system is None
    assert base.tool_choice is None
    assert "system" not in encode_create_message_params(base)
    assert configured.system == "You are terse."


def test_params_are_immutable():
    params = CreateMessageParams.from_required(_required())

    with pytest.raises(ValidationError):
        params.model = "other"


def test_metadata_serializes_as_flat_mapping_under_metadata_key():
    params = CreateMessageParams.from_required(_required()).with_metadata(
        Metadata({"trace": "42"})
    )

    wire = encode_create_message_params(params)

    assert wire["metadata"] == {"trace": "42"}
    assert "trace" not in wire
    assert params.metadata.fields == {"trace": "42"}


def test_tool_description_is_omitted_when_absent():
    params = CreateMessageParams.from_required(_required()).with_tools(
        [Tool(name="ping", input_schema={"type": "object"})]
    )

    assert encode_create_message_params(params)["tools"] == [
        {"name": "ping", "input_schema": {"type": "object"}}
    ]


def test_no_semantic_validation_on_required_fields():
    params = RequiredMessageParams(model="claude-3", messages=[], max_tokens=0).to_create_params()

    assert encode_create_message_params(params) == {
        "model": "claude-3",
        "messages": [],
        "max_tokens": 0,
    }


def test_message_order_is_preserved():
    turns = [
        Message.new_text(Role.USER, "first"),
        Message.new_text(Role.ASSISTANT, "second"),
        Message.new_text(Role.USER, "third"),
    ]
    params = RequiredMessageParams(model="claude-3", messages=turns, max_tokens=5).to_create_params()

    wire = encode_create_message_params(params)

    assert [m["content"] for m in wire["messages"]] == ["first", "second", "third"]


def test_count_tokens_params_carry_model_and_messages_only():
    params = CreateMessageParams.from_required(_required()).with_system("ignored")

    assert encode_count_tokens_params(params.to_count_tokens_params()) == {
        "model": "claude-3",
        "messages": [{"role": "user", "content": "hi"}],
    }


@pytest.mark.parametrize(
    "configure",
    [
        lambda params: params.with_temperature("hot"),
        lambda params: params.with_tool_choice({"type": "sometimes"}),
        lambda params: params.with_tools([{"description": "no name", "input_schema": {}}]),
        lambda params: params.with_metadata({"trace": 42}),
        lambda params: params.with_top_k(-1),
        lambda params: params.with_top_k(True),
    ],
)
def test_wrongly_typed_setter_values_are_rejected(configure):
    with pytest.raises(ValidationError):
        configure(CreateMessageParams.from_required(_required()))


def test_setters_build_typed_values_from_plain_data():
    params = (
        CreateMessageParams.from_required(_required())
        .with_tool_choice({"type": "auto"})
        .with_tools([{"name": "ping", "input_schema": {"type": "object"}}])
    )

    assert params.tool_choice == ToolChoiceAuto()
    assert params.tools == [Tool(name="ping", input_schema={"type": "object"})]
    assert encode_create_message_params(params)["tools"] == [
        {"name": "ping", "input_schema": {"type": "object"}}
    ]


def test_single_string_stop_sequence_is_rejected():
    params = CreateMessageParams.from_required(_required())

    with pytest.raises(TypeError):
        params.with_stop_sequences("END")

    assert params.with_stop_sequences(["END"]).stop_sequences == ["END"]


def test_tool_without_description_round_trips_through_request():
    tool = Tool(name="ping", input_schema={"type": "object", "default": None})
    params = CreateMessageParams.from_required(_required()).with_tools([tool])

    wire = encode_create_message_params(params)
    decoded = CreateMessageParams.model_validate(wire)

    assert wire["tools"] == [{"name": "ping", "input_schema": {"type": "object", "default": None}}]
    assert decoded == params
    assert decoded.tools[0].description is None
    assert encode_create_message_params(decoded) == wire
