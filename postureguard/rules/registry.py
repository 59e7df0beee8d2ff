from types import MappingProxyType
from typing import Mapping

from postureguard.models.mode_model import AnalysisMode
from postureguard.rules.desk_sitting_rules import DeskSittingRules
from postureguard.rules.rule_set import RuleSet
from postureguard.rules.squat_rules import SquatRules


# Rule sets are stateless, one shared instance per mode
RULE_SETS: Mapping[AnalysisMode, RuleSet] = MappingProxyType({
    AnalysisMode.SQUAT: SquatRules(),
    AnalysisMode.DESK_SITTING: DeskSittingRules(),
})


def rule_set_for(mode) -> RuleSet:
    """Raises UnsupportedMode for anything outside AnalysisMode."""
    return RULE_SETS[AnalysisMode.parse(mode)]
