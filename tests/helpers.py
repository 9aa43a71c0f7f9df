from sayings.schema import SayingRecord

SAYING = "D'Aen op oder de Beidel."


def make_record(lu_part1="D'Aen op oder", lu_part2="de Beidel.", **overrides) -> SayingRecord:
    data = {
        "original_lu": SAYING,
        "lu_part1": lu_part1,
        "lu_part2": lu_part2,
        "en_literal_translation_p1": "Eyes up or",
        "en_literal_translation_p2": "the bag.",
        "en_closest_real_corresponding_saying_p1": "Pay attention",
        "en_closest_real_corresponding_saying_p2": "or pay the price.",
        "culturalPopularity": 4,
        "wordsDifficulty": 3,
        "vulgarity": 1,
    }
    data.update(overrides)
    return SayingRecord(**data)


class StubModel:
    """Gateway stand-in: returns one prepared answer per call and records the calls."""

    def __init__(self, *answers):
        self.answers = list(answers)
        self.calls = []

    def __call__(self, texts, extra_instructions=""):
        self.calls.append((list(texts), extra_instructions))
        answer = self.answers.pop(0)
        if isinstance(answer, Exception):
            raise answer
        return answer
