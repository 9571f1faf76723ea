import unittest

from PyLandmarkConverter.errors import UnsupportedConversionError, UnsupportedFormatError
from PyLandmarkConverter.landmarks import FIXED, MOVING
from PyLandmarkConverter.processing.adapters import (
    LandmarkReaderRegistry,
    LandmarkWriterRegistry,
    PlainTextWriter,
    PointPairReader,
    RegistrationListReader,
    SlicerFiducialWriter,
    TransformixWriter,
    check_compatibility,
)


class TestRegistries(unittest.TestCase):
    def test_builtin_formats(self):
        self.assertEqual(sorted(LandmarkReaderRegistry.list_available()), ["ireg", "ix_pp"])
        self.assertEqual(
            sorted(LandmarkWriterRegistry.list_available()),
            ["slr_fid", "std_txt", "tfx_lmk"],
        )

    def test_get_returns_instances(self):
        self.assertIsInstance(LandmarkReaderRegistry.get("ix_pp"), PointPairReader)
        self.assertIsInstance(LandmarkWriterRegistry.get("slr_fid"), SlicerFiducialWriter)

    def test_unknown_names(self):
        with self.assertRaises(UnsupportedFormatError) as cm:
            LandmarkReaderRegistry.get("csv")
        self.assertIn("ix_pp", str(cm.exception))
        with self.assertRaises(UnsupportedFormatError):
            LandmarkWriterRegistry.get("csv")


class TestCompatibility(unittest.TestCase):
    def test_supported_pairs(self):
        for in_type in ("ix_pp", "ireg"):
            for out_type in ("slr_fid", "std_txt"):
                check_compatibility(in_type, out_type)
        check_compatibility("ix_pp", "tfx_lmk")

    def test_registration_list_to_transformix(self):
        self.assertFalse(TransformixWriter.accepts(RegistrationListReader))
        with self.assertRaises(UnsupportedConversionError):
            check_compatibility("ireg", "tfx_lmk")

    def test_coordinate_sets(self):
        self.assertEqual(SlicerFiducialWriter().coordinate_sets(PointPairReader), [FIXED, MOVING])
        self.assertEqual(SlicerFiducialWriter().coordinate_sets(RegistrationListReader), [FIXED])
        self.assertEqual(PlainTextWriter().coordinate_sets(PointPairReader), [FIXED, MOVING])
        self.assertEqual(TransformixWriter().coordinate_sets(PointPairReader), [FIXED])


if __name__ == "__main__":
    unittest.main()
