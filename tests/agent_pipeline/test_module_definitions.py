"""
Tests for the built-in module definitions.

Tests default configurations, validation findings and exposed outputs of
each module type.

Version: 1.0.0
"""

import pytest

from core.agent_pipeline import (
    ChannelsModuleDefinition,
    DestinationsModuleDefinition,
    JsonExtractorModuleDefinition,
    ModelModuleDefinition,
    PromptModuleDefinition,
    RouterModuleDefinition,
    Settings,
    TriggerModuleDefinition,
    extract_prompt_inputs,
)
from core.agent_pipeline.modules import normalize_json_path


# ============================================================================
# FIXTURES
# ============================================================================

@pytest.fixture
def settings():
    """Settings with a short model list."""
    return Settings(
        default_model="openai/gpt-5-mini",
        available_models=["openai/gpt-5", "openai/gpt-5-mini"],
        default_temperature=0.3,
    )


@pytest.fixture
def trigger_config():
    """Valid trigger config with one input trigger."""
    return {
        "enabled": True,
        "strategy": "all_match",
        "inputTriggers": [
            {
                "id": "it-1",
                "inputId": "task_title",
                "conditions": [
                    {"id": "c0", "type": "trigger", "triggerType": "on_update"},
                    {"id": "c1", "type": "filter", "operator": "contains", "value": "urgent"},
                ],
                "conditionLogic": "0 AND 1",
            }
        ],
    }


def error_fields(result):
    return [issue.field for issue in result.errors]


def error_messages(result):
    return [issue.message for issue in result.errors]


# ============================================================================
# TRIGGER
# ============================================================================

@pytest.mark.unit
class TestTriggerModule:
    """Test the trigger module definition."""

    def test_default_config(self):
        """Test a new trigger is disabled with no input triggers."""
        config = TriggerModuleDefinition().get_default_config()
        assert config["enabled"] is False
        assert config["inputTriggers"] == []
        assert config["strategy"] == "any_match"

    def test_default_strategy_from_settings(self):
        """Test the strategy of a new trigger comes from settings."""
        settings = Settings(default_trigger_strategy="all_match")
        assert TriggerModuleDefinition(settings).get_default_config()["strategy"] == "all_match"

    def test_default_config_warns(self):
        """Test an empty trigger is valid with a warning."""
        definition = TriggerModuleDefinition()
        result = definition.validate_config(definition.get_default_config())
        assert result.valid
        assert result.warnings == ["No input triggers configured"]

    def test_valid_config(self, trigger_config):
        """Test a complete trigger config."""
        result = TriggerModuleDefinition().validate_config(trigger_config)
        assert result.valid
        assert result.errors == []

    def test_invalid_strategy(self, trigger_config):
        """Test an unknown strategy is reported."""
        trigger_config["strategy"] = "some_match"
        result = TriggerModuleDefinition().validate_config(trigger_config)
        assert not result.valid
        assert error_messages(result) == ["Strategy must be all_match or any_match"]

    def test_missing_input_and_conditions(self):
        """Test input triggers need an input and conditions."""
        result = TriggerModuleDefinition().validate_config(
            {"inputTriggers": [{"id": "it-1", "conditions": []}]}
        )
        assert error_fields(result) == ["inputTriggers.0.inputId", "inputTriggers.0.conditions"]

    def test_formula_errors_reported_per_trigger(self, trigger_config):
        """Test formula findings are prefixed with the trigger position."""
        trigger_config["inputTriggers"][0]["conditionLogic"] = "0 AND 5"
        result = TriggerModuleDefinition().validate_config(trigger_config)
        assert error_messages(result) == [
            "Input trigger 1: Condition 5 does not exist (valid range: 0-1)"
        ]

    def test_condition_fields_required(self, trigger_config):
        """Test trigger conditions need a type and filters an operator."""
        conditions = trigger_config["inputTriggers"][0]["conditions"]
        del conditions[0]["triggerType"]
        del conditions[1]["operator"]
        result = TriggerModuleDefinition().validate_config(trigger_config)
        assert error_fields(result) == [
            "inputTriggers.0.conditions.0.triggerType",
            "inputTriggers.0.conditions.1.operator",
        ]

    def test_outputs_only_when_enabled(self, trigger_config):
        """Test the trigger status output of an enabled trigger."""
        definition = TriggerModuleDefinition()
        outputs = definition.get_dynamic_outputs(trigger_config, "t1")
        assert [output.id for output in outputs] == ["module_t1_trigger_status"]

        trigger_config["enabled"] = False
        assert definition.get_dynamic_outputs(trigger_config, "t1") == []


# ============================================================================
# PROMPT
# ============================================================================

@pytest.mark.unit
class TestPromptModule:
    """Test the prompt module definition."""

    def test_extract_inputs(self):
        """Test agent-input tags are read in order."""
        content = (
            '<p>Summarize <agent-input elementid="task_title" type="task_title" label="Title"></agent-input>'
            ' for <agent-input elementid="json_v1" type="json_priority"></agent-input></p>'
        )
        inputs = extract_prompt_inputs(content)
        assert [(item.id, item.type) for item in inputs] == [
            ("task_title", "task_title"),
            ("json_v1", "json_priority"),
        ]
        assert inputs[0].label == "Title"

    def test_extract_skips_tags_without_id(self):
        """Test tags without elementid are ignored."""
        assert extract_prompt_inputs('<agent-input type="task_title"></agent-input>') == []

    def test_empty_prompt_warnings(self):
        """Test an empty prompt is valid with warnings."""
        result = PromptModuleDefinition().validate_config({"content": ""})
        assert result.valid
        assert result.warnings == ["Prompt is empty", "Prompt does not reference any inputs"]

    def test_prompt_without_inputs(self):
        """Test a prompt without input references warns once."""
        result = PromptModuleDefinition().validate_config({"content": "<p>Hello</p>"})
        assert result.warnings == ["Prompt does not reference any inputs"]

    def test_outputs(self):
        """Test a prompt with content exposes its rendered prompt."""
        definition = PromptModuleDefinition()
        outputs = definition.get_dynamic_outputs({"content": "Hi"}, "p1")
        assert [(output.id, output.type) for output in outputs] == [
            ("module_p1_prompt", "module_p1_prompt_output")
        ]
        assert definition.get_dynamic_outputs({"content": "  "}, "p1") == []


# ============================================================================
# MODEL
# ============================================================================

@pytest.mark.unit
class TestModelModule:
    """Test the model module definition."""

    def test_default_config_from_settings(self, settings):
        """Test the default model and temperature come from settings."""
        config = ModelModuleDefinition(settings).get_default_config()
        assert config["model"] == "openai/gpt-5-mini"
        assert config["temperature"] == 0.3

    def test_default_config_valid(self, settings):
        """Test the default config passes validation."""
        definition = ModelModuleDefinition(settings)
        assert definition.validate_config(definition.get_default_config()).valid

    def test_model_required(self, settings):
        """Test an empty model is an error."""
        result = ModelModuleDefinition(settings).validate_config({"model": ""})
        assert error_messages(result) == ["A model must be selected"]

    def test_unknown_model(self, settings):
        """Test models outside the configured list are errors."""
        result = ModelModuleDefinition(settings).validate_config({"model": "x-ai/grok-beta"})
        assert error_messages(result) == ["Unknown model: x-ai/grok-beta"]

    def test_parameter_ranges(self, settings):
        """Test temperature and max tokens limits."""
        result = ModelModuleDefinition(settings).validate_config(
            {"model": "openai/gpt-5", "temperature": 3.5, "maxTokens": 0}
        )
        assert error_fields(result) == ["temperature", "maxTokens"]

    def test_unparseable_config(self, settings):
        """Test type errors become validation issues."""
        result = ModelModuleDefinition(settings).validate_config(
            {"model": "openai/gpt-5", "temperature": "warm"}
        )
        assert not result.valid
        assert error_fields(result) == ["temperature"]

    def test_outputs(self, settings):
        """Test the LLM response output."""
        outputs = ModelModuleDefinition(settings).get_dynamic_outputs({"model": "openai/gpt-5"}, "m1")
        assert len(outputs) == 1
        assert outputs[0].id == "module_m1_output"
        assert outputs[0].type == "module_m1_llm_response"
        assert outputs[0].label == "openai/gpt-5 response"


# ============================================================================
# JSON EXTRACTOR
# ============================================================================

@pytest.mark.unit
class TestJsonExtractorModule:
    """Test the json_extractor module definition."""

    def test_normalize_path(self):
        """Test bare paths get the root prefix."""
        assert normalize_json_path("user.name") == "$.user.name"
        assert normalize_json_path(".user") == "$.user"
        assert normalize_json_path("$.items[0]") == "$.items[0]"

    def test_empty_config_warnings(self):
        """Test an empty extractor warns about variables and source."""
        result = JsonExtractorModuleDefinition().validate_config({})
        assert result.valid
        assert result.warnings == ["No variables defined", "No source input selected"]

    def test_variable_errors(self):
        """Test names, duplicates and paths are checked."""
        result = JsonExtractorModuleDefinition().validate_config({
            "sourceInputId": "module_m1_output",
            "variables": [
                {"id": "v1", "name": "priority", "path": "$.priority"},
                {"id": "v2", "name": "priority", "path": "$.other"},
                {"id": "v3", "name": "", "path": "$.x"},
                {"id": "v4", "name": "bad", "path": "$.[[["},
                {"id": "v5", "name": "blank", "path": ""},
            ],
        })
        assert error_fields(result) == [
            "variables.1.name",
            "variables.2.name",
            "variables.3.path",
            "variables.4.path",
        ]
        assert "Duplicate variable name: priority" in error_messages(result)

    def test_outputs(self):
        """Test one json input per variable."""
        outputs = JsonExtractorModuleDefinition().get_dynamic_outputs({
            "variables": [
                {"id": "v1", "name": "priority", "path": "$.priority"},
                {"id": "v2", "name": "owner", "path": "owner.name", "description": "Owner name"},
            ]
        }, "j1")
        assert [(output.id, output.type, output.label) for output in outputs] == [
            ("json_v1", "json_priority", "priority"),
            ("json_v2", "json_owner", "owner"),
        ]
        assert outputs[0].content == "$.priority"
        assert outputs[1].content == "Owner name"

    def test_extract_variables(self):
        """Test applying paths to a document."""
        config = {
            "variables": [
                {"id": "v1", "name": "priority", "path": "priority"},
                {"id": "v2", "name": "tags", "path": "$.tags[*]"},
                {"id": "v3", "name": "missing", "path": "$.nothing"},
            ]
        }
        values = JsonExtractorModuleDefinition().extract_variables(
            config, {"priority": "high", "tags": ["a", "b"]}
        )
        assert values == {"priority": "high", "tags": ["a", "b"], "missing": None}


# ============================================================================
# ROUTER
# ============================================================================

@pytest.mark.unit
class TestRouterModule:
    """Test the router module definition."""

    def test_default_config_valid(self):
        """Test the default router routes to all destinations."""
        definition = RouterModuleDefinition()
        config = definition.get_default_config()
        assert config["strategy"] == "all_destinations"
        result = definition.validate_config(config)
        assert result.valid
        assert result.warnings == []

    def test_default_strategy_from_settings(self):
        """Test the strategy of a new router comes from settings."""
        settings = Settings(default_router_strategy="based_on_llm")
        config = RouterModuleDefinition(settings).get_default_config()
        assert config["strategy"] == "based_on_llm"
        assert config["rules"] == []

    def test_strategy_required(self):
        """Test a missing strategy stops validation."""
        result = RouterModuleDefinition().validate_config({"rules": []})
        assert error_messages(result) == ["A routing strategy must be selected"]

    def test_unknown_strategy(self):
        """Test an unknown strategy is an error."""
        result = RouterModuleDefinition().validate_config({"strategy": "random"})
        assert error_messages(result) == ["Unknown routing strategy: random"]

    def test_rules_ignored_for_all_destinations(self):
        """Test rules under all_destinations only warn."""
        result = RouterModuleDefinition().validate_config({
            "strategy": "all_destinations",
            "rules": [{"id": "r1", "destinationId": "d1"}],
        })
        assert result.valid
        assert result.warnings == ["Rules are ignored when routing to all destinations"]

    def test_based_on_input_rules(self):
        """Test input rules need a destination and a source."""
        result = RouterModuleDefinition().validate_config({
            "strategy": "based_on_input",
            "rules": [
                {"id": "r1", "sourceVariableId": "json_v1", "destinationId": "d1"},
                {"id": "r2", "sourceVariableId": ["", " "]},
                {"id": "r3", "conditions": [], "conditionLogic": ""},
            ],
        })
        assert error_fields(result) == ["rules.1.destinationId", "rules.1.sourceVariableId"]

    def test_based_on_input_without_rules(self):
        """Test missing rules warn."""
        result = RouterModuleDefinition().validate_config({"strategy": "based_on_input"})
        assert result.valid
        assert result.warnings == ["No routing rules configured"]

    def test_based_on_llm_instructions(self):
        """Test an empty paragraph counts as no instructions."""
        result = RouterModuleDefinition().validate_config({
            "strategy": "based_on_llm",
            "content": "<p></p>",
            "rules": [{"id": "r1", "destinationId": "d1"}],
        })
        assert result.valid
        assert result.warnings == ["No routing instructions provided for the LLM"]

    def test_routing_result_output_always_present(self):
        """Test the routing result is exposed even for unreadable configs."""
        outputs = RouterModuleDefinition().get_dynamic_outputs({"strategy": "random"}, "r1")
        assert [output.id for output in outputs] == ["module_r1_routing_result"]


# ============================================================================
# DESTINATIONS
# ============================================================================

@pytest.mark.unit
class TestDestinationsModule:
    """Test the destinations module definition."""

    def test_empty_warns(self):
        """Test no destinations is valid with a warning and still exposes the summary."""
        result = DestinationsModuleDefinition().validate_config({"destinations": []})
        assert result.valid
        assert result.warnings == ["No destinations configured"]
        outputs = DestinationsModuleDefinition().get_dynamic_outputs({"destinations": []}, "d")
        assert [output.id for output in outputs] == ["module_d_destinations_result"]

    def test_target_fields_required(self):
        """Test database and component targets need their fields."""
        result = DestinationsModuleDefinition().validate_config({
            "destinations": [
                {"id": "d1", "type": "column", "label": "Notes", "targetType": "database", "targetTable": "tasks"},
                {"id": "d2", "type": "ui", "targetType": "ui_component", "componentName": "Panel"},
            ]
        })
        assert error_fields(result) == [
            "destinations.0.targetColumn",
            "destinations.1.label",
            "destinations.1.eventType",
        ]

    def test_outputs(self):
        """Test one input per destination plus the result summary."""
        outputs = DestinationsModuleDefinition().get_dynamic_outputs({
            "destinations": [
                {"id": "d1", "type": "column", "targetTable": "tasks", "targetColumn": "notes"},
                {"id": "d2", "type": "ui", "label": "Suggestions"},
            ]
        }, "dm")
        assert [(output.id, output.type, output.label) for output in outputs] == [
            ("d1", "destination_d1", "tasks.notes"),
            ("d2", "destination_d2", "Suggestions"),
            ("module_dm_destinations_result", "module_dm_destinations_result", "Destinations result"),
        ]
        assert outputs[0].order == 1000
        assert outputs[1].order == 1001

    def test_legacy_elements(self):
        """Test destinations stored under elements are read."""
        outputs = DestinationsModuleDefinition().get_dynamic_outputs(
            {"elements": [{"id": "d1", "type": "column", "label": "Notes"}]}, "dm"
        )
        assert outputs[0].id == "d1"


# ============================================================================
# CHANNELS
# ============================================================================

@pytest.mark.unit
class TestChannelsModule:
    """Test the channels module definition."""

    def test_empty_warns(self):
        """Test no channels is valid with a warning."""
        result = ChannelsModuleDefinition().validate_config({})
        assert result.valid
        assert result.warnings == ["No channels configured"]

    def test_blank_channel(self):
        """Test blank channel names are errors."""
        result = ChannelsModuleDefinition().validate_config({"channels": ["slack", " "]})
        assert error_messages(result) == ["Channel 2: name is required"]

    def test_outputs(self):
        """Test the channels result output."""
        outputs = ChannelsModuleDefinition().get_dynamic_outputs({"channels": ["slack"]}, "c1")
        assert [output.id for output in outputs] == ["module_c1_channels_result"]
