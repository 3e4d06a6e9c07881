from datetime import date, datetime
import unittest

from thelemic_date.era import DAYS_OF_WEEK, anno_token, anno_years, dies_for_date
from thelemic_date.errors import InvalidDateError


class AnnoTokenTest(unittest.TestCase):
    def test_cycles_and_years(self) -> None:
        self.assertEqual(anno_token(0), "00")
        self.assertEqual(anno_token(21), "0xxi")
        self.assertEqual(anno_token(22), "I0")
        self.assertEqual(anno_token(122), "Vxii")  # equinox 2026 - equinox 2027
        self.assertEqual(anno_token(505), "XXIIxxi")

    def test_out_of_table(self) -> None:
        with self.assertRaises(InvalidDateError):
            anno_token(506)
        with self.assertRaises(InvalidDateError):
            anno_token(-1)


class AnnoYearsTest(unittest.TestCase):
    def test_calendar_cutoff_without_sun(self) -> None:
        self.assertEqual(anno_years(datetime(2026, 3, 19, 23, 59)), 121)
        self.assertEqual(anno_years(datetime(2026, 3, 20, 0, 0)), 122)
        self.assertEqual(anno_years(datetime(2026, 12, 31)), 122)

    def test_sun_longitude_decides_near_equinox(self) -> None:
        # Sun still in Pisces on 20 March: the old year continues.
        self.assertEqual(anno_years(datetime(2026, 3, 20, 10, 0), sun_longitude=359.8), 121)
        # Sun already in Aries.
        self.assertEqual(anno_years(datetime(2026, 3, 20, 18, 0), sun_longitude=0.1), 122)
        # Late in the year the Sun is past Libra but the year has turned.
        self.assertEqual(anno_years(datetime(2026, 12, 1), sun_longitude=249.0), 122)
        self.assertEqual(anno_years(datetime(2026, 1, 15), sun_longitude=294.0), 121)

    def test_before_epoch(self) -> None:
        with self.assertRaises(InvalidDateError):
            anno_years(datetime(1904, 3, 1))
        self.assertEqual(anno_years(datetime(1904, 3, 21)), 0)


def test_dies_names_follow_weekdays():
    assert len(DAYS_OF_WEEK) == 7
    assert dies_for_date(date(2024, 3, 18)) == "Lunae"
    assert dies_for_date(date(2024, 3, 20)) == "Mercurii"
    assert dies_for_date(date(2024, 3, 24)) == "Solis"
    assert dies_for_date(date(1904, 4, 8)) == "Veneris"


if __name__ == "__main__":
    unittest.main()
