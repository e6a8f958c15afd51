"""Result-screen copy, chosen by scenario tier."""

from __future__ import annotations

from million_calculator.presentation.formatting import horizon_phrase
from million_calculator.schemas.calculation import Narrative, ProjectionResult, ScenarioTier

DISCLAIMER = (
    "* Simulação baseada em projeções de rentabilidade estimadas. "
    "Retornos passados não garantem ganhos futuros."
)


def _entry_narrative(result: ProjectionResult) -> Narrative:
    real = horizon_phrase(result.baseline_years)
    optimized = horizon_phrase(result.optimized_years)
    return Narrative(
        headline=f"{result.name}, atenção ao seu futuro.",
        body=[
            f"No seu ritmo atual, a liberdade financeira pode demorar {real} para chegar.",
            f"Com a estratégia certa, você poderia reduzir isso para apenas {optimized}.",
        ],
        highlight=optimized,
        cta_label="Acessar Plano de Aceleração",
        cta_href="#offer-iniciante",
        disclaimer=DISCLAIMER,
    )


def _investor_narrative(result: ProjectionResult) -> Narrative:
    real = horizon_phrase(result.baseline_years)
    optimized = horizon_phrase(result.optimized_years)
    return Narrative(
        headline=f"Parabéns, {result.name}!",
        body=[
            "Você está construindo um legado sólido.",
            f"Sua projeção aponta que você chegará lá em {real}.",
            f"E se pudesse antecipar sua liberdade para {optimized}?",
        ],
        highlight=optimized,
        cta_label="Conhecer Mentoria Wealth",
        cta_href="#offer-expert",
        disclaimer=DISCLAIMER,
    )


_TEMPLATES = {
    ScenarioTier.ENTRY: _entry_narrative,
    ScenarioTier.INVESTOR: _investor_narrative,
}


def render_narrative(result: ProjectionResult) -> Narrative:
    return _TEMPLATES[result.tier](result)
