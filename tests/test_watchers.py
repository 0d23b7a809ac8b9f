import unittest

from versions import Quantity
from watchers import MemoryValues, Pair


class PairTests(unittest.TestCase):
    def test_previous_is_last_successful_sample(self) -> None:
        values = MemoryValues()
        samples = [5, None, 7, None, None, 9, 12]
        accepted = []

        for sample in samples:
            if values.update(Quantity.ACCUM_FRAMES, sample):
                accepted.append(sample)
            pair = values.accum_frames
            if len(accepted) >= 2:
                self.assertEqual(pair.previous, accepted[-2])
            self.assertEqual(pair.current, accepted[-1] if accepted else 0)

        self.assertEqual(accepted, [5, 7, 9, 12])

    def test_failed_read_leaves_pair_untouched(self) -> None:
        values = MemoryValues()
        values.update(Quantity.SUBMENUS_OPEN, 2)
        values.update(Quantity.SUBMENUS_OPEN, 0)

        self.assertFalse(values.update(Quantity.SUBMENUS_OPEN, None))
        self.assertEqual((values.submenus_open.previous, values.submenus_open.current), (2, 0))

    def test_changed_and_increased(self) -> None:
        pair = Pair()
        self.assertFalse(pair.changed())
        pair.update(3)
        self.assertTrue(pair.changed())
        self.assertTrue(pair.increased())
        pair.update(1)
        self.assertTrue(pair.changed())
        self.assertFalse(pair.increased())
        pair.update(1)
        self.assertFalse(pair.changed())

    def test_string_pairs_start_empty(self) -> None:
        values = MemoryValues()
        self.assertEqual(values.current_level.current, "")
        self.assertEqual(values.current_music.previous, "")

        values.update(Quantity.CURRENT_MUSIC, "Music_Level04!BOSS")
        self.assertTrue(values.current_music.changed())
        self.assertIs(values[Quantity.CURRENT_MUSIC], values.current_music)

    def test_quantities_are_independent(self) -> None:
        values = MemoryValues()
        values.update(Quantity.ACCUM_FRAMES, 100)
        self.assertEqual(values.accum_frames_survival.current, 0)
        self.assertEqual(values.current_section_frames.current, 0)


if __name__ == "__main__":
    unittest.main()
