"""
Prompt templates for the sayings task.

The system prompt sets the model's role. The user prompt lists the batch of
sayings, the splitting rules and one fully worked example record.
"""

import json

SYSTEM_PROMPT = """\
You are an expert in Luxembourgish language and culture. Analyze and translate \
the provided sayings, splitting each into two semantic parts. Also assess cultural \
popularity, word difficulty, and vulgarity.
"""

EXAMPLE_RECORD = {
    "lu_part1": "Wann d'Aarbecht ee räich méich,",
    "lu_part2": "da wier den Iesel méi räich wéi de Mëller.",
    "en_literal_translation_p1": "If the work makes one rich,",
    "en_literal_translation_p2": "then the donkey would be richer than the miller.",
    "en_closest_real_corresponding_saying_p1": "If hard work led to success,",
    "en_closest_real_corresponding_saying_p2": "the donkey would own the farm.",
    "culturalPopularity": 3,
    "wordsDifficulty": 3,
    "vulgarity": 1,
}

# Appended to the prompt when items are sent a second time after failing validation.
CORRECTIVE_INSTRUCTIONS = (
    "\n\nCRITICAL FIX: The previous attempt failed validation. Every saying MUST be "
    "split into TWO semantic parts. All \"p2\" fields (lu_part2, "
    "en_literal_translation_p2, en_closest_real_corresponding_saying_p2) MUST "
    "contain text. Do not leave them empty."
)


def build_user_prompt(texts: list[str], extra_instructions: str = "") -> str:
    """
    Build the user-turn message for one batch.

    Args:
        texts:              Luxembourgish sayings, in batch order.
        extra_instructions: Appended verbatim after the rules (corrective retry).

    Returns:
        A formatted prompt string.
    """
    numbered = "\n".join(f'{i}. "{text}"' for i, text in enumerate(texts, 1))
    example = json.dumps(EXAMPLE_RECORD, ensure_ascii=False, indent=2)
    return (
        f"Analyze and translate the following Luxembourgish sayings:\n"
        f"{numbered}\n\n"
        f"Important: Part1 of each saying should be enough for the quiz player to be able "
        f"to guess Part2, but try not to have just one word as part 2 (i.e. it should be "
        f"quite semantically balanced). Also, for each saying, the combination of lu_part1 "
        f"and lu_part2 must exactly match the original saying. Do not modify the original "
        f"text. Return the results in the requested JSON format: an object with a "
        f"\"sayings\" array holding one record per saying, in the same order.\n"
        f"{extra_instructions}\n\n"
        f"Example record:\n```json\n{example}\n```\n"
    )
