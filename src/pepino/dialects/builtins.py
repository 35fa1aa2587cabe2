"""Built-in dialect keyword tables.

Entries use the ``gherkin-languages.json`` layout so they can be loaded
with the same code path as user-supplied dialect files.
"""

from __future__ import annotations

from typing import Any

DEFAULT_LANGUAGE = "en"

BUILTIN_DIALECTS: dict[str, dict[str, Any]] = {
    "en": {
        "name": "English",
        "native": "English",
        "feature": ["Feature", "Business Need", "Ability"],
        "background": ["Background"],
        "scenario": ["Example", "Scenario"],
        "scenarioOutline": ["Scenario Outline", "Scenario Template"],
        "examples": ["Examples", "Scenarios"],
        "given": ["* ", "Given "],
        "when": ["* ", "When "],
        "then": ["* ", "Then "],
        "and": ["* ", "And "],
        "but": ["* ", "But "],
    },
    "en-pirate": {
        "name": "Pirate",
        "native": "Pirate",
        "feature": ["Ahoy matey!"],
        "background": ["Yo-ho-ho"],
        "scenario": ["Heave to"],
        "scenarioOutline": ["Shiver me timbers"],
        "examples": ["Dead men tell no tales"],
        "given": ["* ", "Gangway! "],
        "when": ["* ", "Blimey! "],
        "then": ["* ", "Let go and haul "],
        "and": ["* ", "Aye "],
        "but": ["* ", "Avast! "],
    },
    "de": {
        "name": "German",
        "native": "Deutsch",
        "feature": ["Funktionalität", "Funktion"],
        "background": ["Grundlage", "Hintergrund", "Voraussetzungen", "Vorbedingungen"],
        "scenario": ["Beispiel", "Szenario"],
        "scenarioOutline": ["Szenariogrundriss", "Szenarien"],
        "examples": ["Beispiele"],
        "given": ["* ", "Angenommen ", "Gegeben sei ", "Gegeben seien "],
        "when": ["* ", "Wenn "],
        "then": ["* ", "Dann "],
        "and": ["* ", "Und "],
        "but": ["* ", "Aber "],
    },
    "es": {
        "name": "Spanish",
        "native": "español",
        "feature": ["Característica", "Necesidad del negocio", "Requisito"],
        "background": ["Antecedentes"],
        "scenario": ["Ejemplo", "Escenario"],
        "scenarioOutline": ["Esquema del escenario"],
        "examples": ["Ejemplos"],
        "given": ["* ", "Dado ", "Dada ", "Dados ", "Dadas "],
        "when": ["* ", "Cuando "],
        "then": ["* ", "Entonces "],
        "and": ["* ", "Y ", "E "],
        "but": ["* ", "Pero "],
    },
    "fr": {
        "name": "French",
        "native": "français",
        "feature": ["Fonctionnalité"],
        "background": ["Contexte"],
        "scenario": ["Exemple", "Scénario"],
        "scenarioOutline": ["Plan du scénario", "Plan du Scénario"],
        "examples": ["Exemples"],
        "given": [
            "* ",
            "Soit ",
            "Sachant que ",
            "Sachant qu'",
            "Sachant ",
            "Etant donné que ",
            "Etant donné qu'",
            "Etant donné ",
            "Etant donnée ",
            "Etant donnés ",
            "Etant données ",
            "Étant donné que ",
            "Étant donné qu'",
            "Étant donné ",
            "Étant donnée ",
            "Étant donnés ",
            "Étant données ",
        ],
        "when": ["* ", "Quand ", "Lorsque ", "Lorsqu'"],
        "then": ["* ", "Alors ", "Donc "],
        "and": ["* ", "Et que ", "Et qu'", "Et "],
        "but": ["* ", "Mais que ", "Mais qu'", "Mais "],
    },
    "it": {
        "name": "Italian",
        "native": "italiano",
        "feature": ["Funzionalità", "Esigenza di Business", "Abilità"],
        "background": ["Contesto"],
        "scenario": ["Esempio", "Scenario"],
        "scenarioOutline": ["Schema dello scenario"],
        "examples": ["Esempi"],
        "given": ["* ", "Dato ", "Data ", "Dati ", "Date "],
        "when": ["* ", "Quando "],
        "then": ["* ", "Allora "],
        "and": ["* ", "E "],
        "but": ["* ", "Ma "],
    },
    "nl": {
        "name": "Dutch",
        "native": "Nederlands",
        "feature": ["Functionaliteit"],
        "background": ["Achtergrond"],
        "scenario": ["Voorbeeld", "Scenario"],
        "scenarioOutline": ["Abstract Scenario"],
        "examples": ["Voorbeelden"],
        "given": ["* ", "Gegeven ", "Stel "],
        "when": ["* ", "Als ", "Wanneer "],
        "then": ["* ", "Dan "],
        "and": ["* ", "En "],
        "but": ["* ", "Maar "],
    },
    "pt": {
        "name": "Portuguese",
        "native": "português",
        "feature": ["Funcionalidade", "Característica", "Caracteristica"],
        "background": ["Contexto", "Cenário de Fundo", "Cenario de Fundo", "Fundo"],
        "scenario": ["Exemplo", "Cenário", "Cenario"],
        "scenarioOutline": [
            "Esquema do Cenário",
            "Esquema do Cenario",
            "Delineação do Cenário",
            "Delineacao do Cenario",
        ],
        "examples": ["Exemplos", "Cenários", "Cenarios"],
        "given": ["* ", "Dado ", "Dada ", "Dados ", "Dadas "],
        "when": ["* ", "Quando "],
        "then": ["* ", "Então ", "Entao "],
        "and": ["* ", "E "],
        "but": ["* ", "Mas "],
    },
}
