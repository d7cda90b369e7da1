"""Tests for the permutation-code (switch) generator."""

import random

import pytest

from puzzle_trainer.config.tiers import CODE_TIERS
from puzzle_trainer.exceptions import GenerationError
from puzzle_trainer.models import CodePuzzle, Difficulty, LevelSpec
from puzzle_trainer.services import PermutationCodeGenerator
from puzzle_trainer.services.code_generator import INPUT_ORDER, is_permutation_code


class TestIsPermutationCode:
    @pytest.mark.parametrize("code", ["1234", "4321", "2143"])
    def test_valid(self, code):
        assert is_permutation_code(code)

    @pytest.mark.parametrize("code", ["1123", "1235", "123", "12345"])
    def test_invalid(self, code):
        assert not is_permutation_code(code)


class TestGenerate:
    """Tests for PermutationCodeGenerator.generate."""

    @pytest.mark.parametrize("difficulty", list(Difficulty))
    def test_exactly_one_candidate_matches(self, difficulty):
        tier = CODE_TIERS[difficulty]
        generator = PermutationCodeGenerator(rng=random.Random(5))

        for level in range(1, tier.level_count + 1):
            puzzle = generator.generate(tier, level)
            matching = [
                c
                for c in puzzle.candidates
                if CodePuzzle.apply_code(c, puzzle.input_order) == puzzle.output_order
            ]
            assert matching == [puzzle.answer]
            assert puzzle.correct_candidates == [puzzle.answer]

    def test_fields(self, code_medium_tier):
        puzzle = PermutationCodeGenerator().generate(code_medium_tier, 2, seed=9)
        assert puzzle.input_order == INPUT_ORDER
        assert puzzle.target == "code"
        assert puzzle.unknowns == ("code",)
        assert puzzle.time_limit_seconds == 90
        assert puzzle.answer in puzzle.candidates

    def test_seed_is_deterministic(self, code_medium_tier):
        first = PermutationCodeGenerator().generate(code_medium_tier, 3, seed=99)
        second = PermutationCodeGenerator().generate(code_medium_tier, 3, seed=99)
        assert first == second

    def test_wrong_family_raises(self, grid_easy_tier):
        with pytest.raises(GenerationError, match="grid family"):
            PermutationCodeGenerator().generate(grid_easy_tier, 1)

    def test_duplicate_codes_raise(self, code_medium_tier, monkeypatch):
        monkeypatch.setattr(
            "puzzle_trainer.services.code_generator.level_spec",
            lambda tier, level: LevelSpec(level, 4, 60, codes=("1234", "1234")),
        )
        with pytest.raises(GenerationError, match="Duplicate"):
            PermutationCodeGenerator().generate(code_medium_tier, 1)

    def test_non_permutation_codes_raise(self, code_medium_tier, monkeypatch):
        monkeypatch.setattr(
            "puzzle_trainer.services.code_generator.level_spec",
            lambda tier, level: LevelSpec(level, 4, 60, codes=("1234", "1124")),
        )
        with pytest.raises(GenerationError, match="not permutations"):
            PermutationCodeGenerator().generate(code_medium_tier, 1)

    def test_empty_code_set_raises(self, code_medium_tier, monkeypatch):
        monkeypatch.setattr(
            "puzzle_trainer.services.code_generator.level_spec",
            lambda tier, level: LevelSpec(level, 4, 60),
        )
        with pytest.raises(GenerationError, match="No codes"):
            PermutationCodeGenerator().generate(code_medium_tier, 1)
