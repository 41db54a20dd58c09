"""Phase gating: each resource type is only created in one rollout phase."""


def phase_gate(unit_phase: int, expected_phase: int) -> bool:
    return unit_phase == expected_phase
