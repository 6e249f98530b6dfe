import re

from retail_ledger.v1_0.helper.ids import IdGenerator


class _ZeroRng:
    def randrange(self, n):
        return 0


def test_generated_ids_are_unique_and_fixed_width():
    gen = IdGenerator(5, seed=7)
    taken = set()
    for _ in range(300):
        new_id = gen.generate(taken)
        assert new_id not in taken
        assert re.fullmatch(r"\d{5}", new_id)
        taken.add(new_id)


def test_invoice_ids_carry_prefix():
    gen = IdGenerator(8, prefix="INV-", seed=1)
    assert re.fullmatch(r"INV-\d{8}", gen.generate(set()))


def test_falls_back_to_clock_value_after_random_draws_collide():
    gen = IdGenerator(1, max_attempts=5, rng=_ZeroRng(), clock=lambda: 17)
    assert gen.generate({"0"}) == "7"


def test_falls_back_to_lowest_free_number_when_clock_collides():
    gen = IdGenerator(1, max_attempts=5, rng=_ZeroRng(), clock=lambda: 1)
    assert gen.generate({"0", "1", "2"}) == "3"


def test_exhausted_space_still_yields_unique_id():
    gen = IdGenerator(1, max_attempts=3, rng=_ZeroRng(), clock=lambda: 0)
    taken = {str(d) for d in range(10)}
    new_id = gen.generate(taken)
    assert new_id not in taken
    assert new_id == "10"
