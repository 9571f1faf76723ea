import json
import os
import tempfile
import unittest

import numpy as np

from PyLandmarkConverter import ConverterConfig, LandmarkConverter
from PyLandmarkConverter.errors import LandmarkConverterError, UnsupportedConversionError
from tests.test_helpers import FIXED_MHD, TWO_POINT_FIXED, two_point_text, write_file


class TestLandmarkConverter(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.dir = self.tmp.name
        fixed_mhd = write_file(self.dir, "fixed.mhd", FIXED_MHD)
        self.pairs_path = write_file(
            self.dir, "pairs.txt", two_point_text(fixed_mhd, unsure_second=1)
        )
        self.out = os.path.join(self.dir, "out")

    def tearDown(self):
        self.tmp.cleanup()

    def test_convert_point_pairs(self):
        converter = LandmarkConverter(
            in_file=self.pairs_path,
            in_type="ix_pp",
            out_dir=self.out,
            out_type="slr_fid",
            keep_all=1,
        )
        written = converter.convert()

        self.assertEqual(len(written), 2)
        self.assertTrue(np.allclose(converter.landmarks.fixed_coordinates, TWO_POINT_FIXED))

    def test_keep_all_zero_discards_very_unsure(self):
        converter = LandmarkConverter(
            in_file=self.pairs_path,
            in_type="ix_pp",
            out_dir=self.out,
            out_type="std_txt",
            keep_all="0",
        )
        landmarks = converter.read_landmarks()
        self.assertEqual(landmarks.point_count, 1)

    def test_settings_file(self):
        settings = os.path.join(self.dir, "settings.json")
        with open(settings, "w") as f:
            json.dump(
                {
                    "in_file": self.pairs_path,
                    "in_type": "ix_pp",
                    "out_dir": self.out,
                    "out_type": "tfx_lmk",
                    "keep_all": 1,
                },
                f,
            )
        written = LandmarkConverter(settings_file=settings).convert()
        self.assertEqual([os.path.basename(p) for p in written], ["pairs_transformix.txt"])

    def test_missing_settings_file(self):
        with self.assertRaises(ValueError):
            LandmarkConverter(settings_file=os.path.join(self.dir, "missing.json"))

    def test_config_object(self):
        cfg = ConverterConfig(
            in_file=self.pairs_path, in_type="ix_pp", out_dir=self.out, out_type="std_txt"
        )
        converter = LandmarkConverter(config=cfg)
        self.assertEqual(converter.stem, "pairs")
        self.assertTrue(converter.keep_all)

    def test_save_before_read(self):
        converter = LandmarkConverter(
            in_file=self.pairs_path, in_type="ix_pp", out_dir=self.out, out_type="std_txt"
        )
        with self.assertRaises(LandmarkConverterError):
            converter.save()

    def test_unsupported_pairing_fails_before_io(self):
        with self.assertRaises(UnsupportedConversionError):
            LandmarkConverter(
                in_file=self.pairs_path, in_type="ireg", out_dir=self.out, out_type="tfx_lmk"
            )
        self.assertFalse(os.path.exists(self.out))


if __name__ == "__main__":
    unittest.main()
