# app/lib/language.py
from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Literal

LanguageCode = Literal["en", "es"]

# substrings that mark an English request; everything else is Spanish
_ENGLISH_MARKERS = ("english", "inglés", "ingles")


def language_code(language: str) -> LanguageCode:
    lowered = (language or "").strip().lower()
    return "en" if any(m in lowered for m in _ENGLISH_MARKERS) else "es"


_EN_STOP_WORDS = frozenset("""
a about above after again against all also am an and any are as at be because been before
being below between both but by can could did do does doing down during each even ever every
few for from further had has have having he her here hers herself him himself his how however
i if in into is it its itself just like made make many may me might more most much must my
myself never no nor not now of off on once one only or other our ours ourselves out over own
said same says she should since so some still such than that the their theirs them themselves
then there these they thing things this those though through to too toward under until up upon
us very was way we well were what when where whether which while who whom whose why will with
within without would yet you your yours yourself yourselves went came come back into onto
""".split())

_ES_STOP_WORDS = frozenset("""
a al algo algunas algunos ante antes aquel aquella aquellas aquellos aqui aquí asi así aun aún
bajo bien cada casi como cómo con contra cual cuál cuales cuando cuándo de del desde donde dónde
durante el él ella ellas ello ellos en entre era eran eres es esa esas ese eso esos esta está
estaba estaban estado estamos estan están estar este esto estos fue fueron fui ha había habían
hace hacia hasta hay la las le les lo los mas más me mi mí mientras mis mucho muchos muy nada
ni no nos nosotros o otra otras otro otros para pero poco por porque que qué quien quién quienes
se sea según ser si sí siempre sin sobre solo sólo son su sus tal también tan tanto te tenía
tenían tener tiene tienen todo todos tras tu tú tus un una unas uno unos usted ustedes vez ya yo
cuando entonces luego había hubo dijo dice después antes ahora
""".split())


@dataclass(frozen=True)
class LanguagePack:
    code: LanguageCode
    title_prefix: str
    default_level: str
    default_category: str
    option_label: str
    placeholder_question: str
    placeholder_explanation: str
    question_fallback: str
    vocab_placeholder_question: str
    glossary_definition: str
    glossary_fallback_definition: str
    stop_words: FrozenSet[str]

    def story_title(self, theme: str) -> str:
        return f"{self.title_prefix}: {theme}".strip()

    def option(self, index: int) -> str:
        return f"{self.option_label} {'ABCD'[index]}"


ENGLISH = LanguagePack(
    code="en",
    title_prefix="Story",
    default_level="intermediate",
    default_category="general",
    option_label="Option",
    placeholder_question="Question {n}: What happens in the story?",
    placeholder_explanation="Review the story to find the answer.",
    question_fallback="Question {n}",
    vocab_placeholder_question="What does “{word}” mean?",
    glossary_definition="Word from the story: “…{snippet}…”",
    glossary_fallback_definition="Word that appears in the story.",
    stop_words=_EN_STOP_WORDS,
)

SPANISH = LanguagePack(
    code="es",
    title_prefix="Historia",
    default_level="intermedio",
    default_category="general",
    option_label="Opción",
    placeholder_question="Pregunta {n}: ¿Qué ocurre en la historia?",
    placeholder_explanation="Revisa la historia para encontrar la respuesta.",
    question_fallback="Pregunta {n}",
    vocab_placeholder_question="¿Qué significa “{word}”?",
    glossary_definition="Palabra de la historia: “…{snippet}…”",
    glossary_fallback_definition="Palabra que aparece en la historia.",
    stop_words=_ES_STOP_WORDS,
)


def language_pack(language: str) -> LanguagePack:
    return ENGLISH if language_code(language) == "en" else SPANISH
