# Copyright Contributors to the OpenVDB Project
# SPDX-License-Identifier: Apache-2.0
#

import itertools
import random
import unittest

from common import TEST_VOCABULARY, ScriptedRandomSource

from friendly_zoo import (
    DEFAULT_VOCABULARY,
    NumpyRandomSource,
    Species,
    Vocabulary,
    Zoo,
    ZooConfig,
    compose_name,
    generate_name,
)


class ScriptedZooTest(unittest.TestCase):
    def test_kebab(self):
        zoo = Zoo(Species.KEBAB, 3, vocabulary=TEST_VOCABULARY)
        rng = ScriptedRandomSource(["poor", "ballsy", "elegant"], "camel")
        self.assertEqual(zoo.generate_with_rng(rng), "poor-ballsy-elegant-camel")

    def test_camel(self):
        zoo = Zoo(Species.CAMEL, 2, vocabulary=TEST_VOCABULARY)
        rng = ScriptedRandomSource(["happy", "lazy"], "fox")
        self.assertEqual(zoo.generate_with_rng(rng), "HappyLazyFox")

    def test_dromedary(self):
        zoo = Zoo(Species.DROMEDARY, 2, vocabulary=TEST_VOCABULARY)
        rng = ScriptedRandomSource(["happy", "lazy"], "fox")
        self.assertEqual(zoo.generate_with_rng(rng), "happyLazyFox")

    def test_dromedary_without_adjectives(self):
        zoo = Zoo(Species.DROMEDARY, 0, vocabulary=TEST_VOCABULARY)
        self.assertEqual(zoo.generate_with_rng(ScriptedRandomSource([], "fox")), "fox")

    def test_camel_without_adjectives(self):
        zoo = Zoo(Species.CAMEL, 0, vocabulary=TEST_VOCABULARY)
        self.assertEqual(zoo.generate_with_rng(ScriptedRandomSource([], "fox")), "Fox")

    def test_custom_delimiter_without_adjectives(self):
        zoo = Zoo(Species.custom_delimiter("$"), 0, vocabulary=TEST_VOCABULARY)
        self.assertEqual(zoo.generate_with_rng(ScriptedRandomSource([], "wolf")), "wolf")

    def test_screaming(self):
        rng = ScriptedRandomSource(["quick", "lazy"], "wolf")
        zoo = Zoo(Species.SCREAMING_SNAKE, 2, vocabulary=TEST_VOCABULARY)
        self.assertEqual(zoo.generate_with_rng(rng), "QUICK_LAZY_WOLF")
        zoo = Zoo(Species.SCREAMING_KEBAB, 2, vocabulary=TEST_VOCABULARY)
        self.assertEqual(zoo.generate_with_rng(rng), "QUICK-LAZY-WOLF")

    def test_adjective_count_saturates_at_vocabulary_size(self):
        vocabulary = Vocabulary(adjectives=["happy", "lazy", "poor"], animals=["fox"])
        rng = ScriptedRandomSource(["happy", "lazy", "poor"], "fox")
        zoo = Zoo(Species.SNAKE, 5, vocabulary=vocabulary)
        with self.assertLogs("friendly_zoo.zoo", level="WARNING"):
            name = zoo.generate_with_rng(rng)
        self.assertEqual(name, "happy_lazy_poor_fox")
        self.assertEqual(rng.sample_sizes, [3])

    def test_negative_adjective_count_fails_at_generation(self):
        zoo = Zoo(Species.SNAKE, -1)
        with self.assertRaises(ValueError):
            zoo.generate()

    def test_compose_name(self):
        config = ZooConfig(species=Species.custom_delimiter("."), adjective_count=1)
        rng = ScriptedRandomSource(["elegant"], "camel")
        self.assertEqual(compose_name(config, TEST_VOCABULARY, rng), "elegant.camel")


class RandomZooTest(unittest.TestCase):
    def setUp(self):
        self.rng = random.Random(1234)
        self.num_trials = 20

    def generate(self, species: Species, adjective_count: int) -> list[str]:
        zoo = Zoo(species, adjective_count)
        return [zoo.generate_with_rng(self.rng) for _ in range(self.num_trials)]

    def test_default_zoo(self):
        zoo = Zoo.default()
        self.assertEqual(zoo.species, Species.SNAKE)
        self.assertEqual(zoo.adjective_count, 1)
        name = zoo.generate()
        self.assertGreater(len(name), 0)
        self.assertEqual(name.count("_"), 1)

    def test_delimiter_count_matches_adjective_count(self):
        delimited = [
            Species.SNAKE,
            Species.SCREAMING_SNAKE,
            Species.KEBAB,
            Species.SCREAMING_KEBAB,
            Species.custom_delimiter("$"),
        ]
        for species in delimited:
            for adjective_count in (0, 1, 3, 10):
                with self.subTest(species=species, adjective_count=adjective_count):
                    for name in self.generate(species, adjective_count):
                        self.assertEqual(name.count(species.delimiter()), adjective_count)

    def test_all_adjectives(self):
        num_adjectives = len(DEFAULT_VOCABULARY.adjectives)
        name = Zoo(Species.KEBAB, num_adjectives).generate_with_rng(self.rng)
        self.assertEqual(name.count("-"), num_adjectives)

    def test_camel_and_dromedary_have_no_delimiters(self):
        for species in (Species.CAMEL, Species.DROMEDARY):
            for adjective_count in (0, 1, 10):
                for name in self.generate(species, adjective_count):
                    self.assertTrue(name.isalpha(), name)

    def test_lowercase_species(self):
        for species in (Species.SNAKE, Species.KEBAB, Species.custom_delimiter("$")):
            for name in self.generate(species, 10):
                self.assertTrue(all(c.islower() for c in name if c.isalpha()), name)

    def test_screaming_species(self):
        for species in (Species.SCREAMING_SNAKE, Species.SCREAMING_KEBAB):
            for name in self.generate(species, 10):
                self.assertTrue(all(c.isupper() for c in name if c.isalpha()), name)

    def test_custom_delimiter(self):
        for name in self.generate(Species.custom_delimiter("$"), 10):
            self.assertEqual(name.count("$"), 10)
            self.assertTrue(all(c.islower() for c in name if c != "$"), name)

    def test_dromedary_starts_lowercase(self):
        for adjective_count in (0, 1, 10):
            for name in self.generate(Species.DROMEDARY, adjective_count):
                self.assertTrue(name[0].islower(), name)

    def test_camel_starts_uppercase(self):
        for adjective_count in (0, 1, 10):
            for name in self.generate(Species.CAMEL, adjective_count):
                self.assertTrue(name[0].isupper(), name)

    def test_adjectives_are_distinct(self):
        zoo = Zoo(Species.SNAKE, 20)
        for _ in range(self.num_trials):
            words = zoo.generate_with_rng(self.rng).split("_")
            self.assertEqual(len(set(words[:-1])), 20)
            self.assertIn(words[-1], DEFAULT_VOCABULARY.animals)

    def test_names_are_never_empty(self):
        for name in self.generate(Species.CAMEL, 0):
            self.assertGreater(len(name), 0)

    def test_same_seed_same_names(self):
        zoo = Zoo(Species.KEBAB, 3)
        rng1 = random.Random(42)
        rng2 = random.Random(42)
        for _ in range(self.num_trials):
            self.assertEqual(zoo.generate_with_rng(rng1), zoo.generate_with_rng(rng2))

    def test_same_numpy_seed_same_names(self):
        zoo = Zoo(Species.DROMEDARY, 4)
        self.assertEqual(zoo.generate_n(10, NumpyRandomSource(7)), zoo.generate_n(10, NumpyRandomSource(7)))

    def test_generate_name(self):
        self.assertEqual(generate_name().count("_"), 1)
        name = generate_name(Species.KEBAB, 2, rng=self.rng)
        self.assertEqual(name.count("-"), 2)


class ZooConfigurationTest(unittest.TestCase):
    def test_setters(self):
        zoo = Zoo()
        zoo.set_species(Species.CAMEL)
        zoo.set_adjectives(4)
        self.assertEqual(zoo.species, Species.CAMEL)
        self.assertEqual(zoo.adjective_count, 4)

        zoo.species = Species.KEBAB
        zoo.adjective_count = 2
        self.assertEqual(zoo.config, ZooConfig(species=Species.KEBAB, adjective_count=2))
        self.assertEqual(zoo.generate().count("-"), 2)

    def test_builders(self):
        zoo = Zoo.default()
        kebab_zoo = zoo.with_species(Species.KEBAB).with_adjectives(3)
        self.assertEqual(kebab_zoo.species, Species.KEBAB)
        self.assertEqual(kebab_zoo.adjective_count, 3)
        self.assertEqual(kebab_zoo.generate().count("-"), 3)

        # The original zoo is untouched.
        self.assertEqual(zoo.species, Species.SNAKE)
        self.assertEqual(zoo.adjective_count, 1)

    def test_builders_keep_vocabulary(self):
        zoo = Zoo(vocabulary=TEST_VOCABULARY).with_adjectives(2).with_species(Species.CAMEL)
        self.assertIs(zoo.vocabulary, TEST_VOCABULARY)

    def test_config_is_a_copy(self):
        zoo = Zoo()
        config = zoo.config
        config.adjective_count = 7
        self.assertEqual(zoo.adjective_count, 1)

    def test_state_dict(self):
        zoo = Zoo(Species.custom_delimiter("+"), 3)
        state_dict = zoo.state_dict()
        self.assertEqual(
            state_dict,
            {"species": {"kind": "custom_delimiter", "custom_character": "+"}, "adjective_count": 3},
        )
        restored = Zoo.from_state_dict(state_dict)
        self.assertEqual(restored.species, zoo.species)
        self.assertEqual(restored.adjective_count, zoo.adjective_count)

    def test_repr(self):
        self.assertEqual(repr(Zoo(Species.CAMEL, 2)), "Zoo(species=Species.CAMEL, adjective_count=2)")


class ZooIterationTest(unittest.TestCase):
    def test_zoo_is_an_infinite_iterable(self):
        zoo = Zoo(Species.KEBAB, 2)
        names = list(itertools.islice(zoo, 50))
        self.assertEqual(len(names), 50)
        for name in names:
            self.assertEqual(name.count("-"), 2)

    def test_iteration_is_restartable(self):
        zoo = Zoo()
        first = iter(zoo)
        second = iter(zoo)
        self.assertIsNot(first, second)
        self.assertEqual(len(list(itertools.islice(first, 3))), 3)
        self.assertEqual(len(list(itertools.islice(second, 3))), 3)

    def test_iteration_follows_reconfiguration(self):
        zoo = Zoo(Species.SNAKE, 1)
        names = iter(zoo)
        self.assertEqual(next(names).count("_"), 1)
        zoo.adjective_count = 3
        self.assertEqual(next(names).count("_"), 3)

    def test_generate_n(self):
        zoo = Zoo(Species.SCREAMING_KEBAB, 1)
        names = zoo.generate_n(5)
        self.assertEqual(len(names), 5)
        self.assertEqual(zoo.generate_n(0), [])
        with self.assertRaises(ValueError):
            zoo.generate_n(-1)


if __name__ == "__main__":
    unittest.main()
