import os
import tempfile
import unittest
from contextlib import redirect_stderr
from io import StringIO

from PyLandmarkConverter.cli import main, parse_args
from PyLandmarkConverter.logging_utils import reset_logging
from tests.test_helpers import FIXED_MHD, two_point_text, write_file


class TestCommandLine(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.dir = self.tmp.name
        fixed_mhd = write_file(self.dir, "fixed.mhd", FIXED_MHD)
        self.pairs_path = write_file(self.dir, "pairs.txt", two_point_text(fixed_mhd))
        self.list_path = write_file(self.dir, "reg.txt", "1\n0.0\n0.0\n0.0\n1.0\n1.0\n1.0\n#")
        self.out = os.path.join(self.dir, "out")
        self.log_file = os.path.join(self.dir, "convert.log")

    def tearDown(self):
        reset_logging()
        self.tmp.cleanup()

    def run_cli(self, *args):
        return main(list(args) + ["-log_file", self.log_file])

    def test_flags_are_order_independent(self):
        args = parse_args(
            ["-keep_all", "0", "-out_type", "std_txt", "-in_file", "a.txt",
             "-out_dir", "out", "-in_type", "ireg"]
        )
        self.assertEqual(args.in_file, "a.txt")
        self.assertEqual(args.in_type, "ireg")
        self.assertEqual(args.keep_all, "0")
        self.assertFalse(args.strict)

    def test_point_pairs_to_fiducials(self):
        status = self.run_cli(
            "-in_file", self.pairs_path, "-in_type", "ix_pp",
            "-out_dir", self.out, "-out_type", "slr_fid", "-keep_all", "1",
        )
        self.assertEqual(status, 0)
        self.assertEqual(
            sorted(os.listdir(self.out)),
            ["pairs_fixed_slicer.fcsv", "pairs_moving_slicer.fcsv"],
        )
        self.assertTrue(os.path.exists(self.log_file))

    def test_registration_list_to_fiducials(self):
        status = self.run_cli(
            "-in_file", self.list_path, "-in_type", "ireg",
            "-out_dir", self.out, "-out_type", "slr_fid", "-keep_all", "1",
        )
        self.assertEqual(status, 0)
        self.assertEqual(os.listdir(self.out), ["reg_fixed_slicer.fcsv"])

    def test_registration_list_to_transformix_fails(self):
        workdir = os.path.join(self.dir, "empty")
        os.makedirs(workdir)
        cwd = os.getcwd()
        os.chdir(workdir)
        try:
            # Default log file name, relative to the working directory
            status = main([
                "-in_file", self.list_path, "-in_type", "ireg",
                "-out_dir", self.out, "-out_type", "tfx_lmk", "-keep_all", "1",
            ])
        finally:
            os.chdir(cwd)
        self.assertEqual(status, 1)
        self.assertFalse(os.path.exists(self.out))
        self.assertEqual(os.listdir(workdir), [])

    def test_output_folder_blocked_by_file(self):
        blocked = write_file(self.dir, "blocked", "not a folder")
        argv = [
            "-in_file", self.list_path, "-in_type", "ireg",
            "-out_dir", blocked, "-out_type", "std_txt", "-keep_all", "1",
        ]
        self.assertEqual(self.run_cli(*argv), 0)
        reset_logging()
        self.assertEqual(self.run_cli(*argv, "-strict"), 1)

    def test_missing_input_file_still_succeeds(self):
        status = self.run_cli(
            "-in_file", os.path.join(self.dir, "missing.txt"), "-in_type", "ireg",
            "-out_dir", self.out, "-out_type", "std_txt", "-keep_all", "1",
        )
        self.assertEqual(status, 0)
        with open(os.path.join(self.out, "missing_fixed_landmarks.txt")) as f:
            self.assertEqual(f.read(), "point\n0\n")

    def test_missing_input_file_fails_in_strict_mode(self):
        status = self.run_cli(
            "-in_file", os.path.join(self.dir, "missing.txt"), "-in_type", "ireg",
            "-out_dir", self.out, "-out_type", "std_txt", "-keep_all", "1", "-strict",
        )
        self.assertEqual(status, 1)

    def test_usage_errors(self):
        bad_invocations = [
            # missing -keep_all
            ["-in_file", "a.txt", "-in_type", "ireg", "-out_dir", "out", "-out_type", "std_txt"],
            # unknown input type
            ["-in_file", "a.txt", "-in_type", "csv", "-out_dir", "out",
             "-out_type", "std_txt", "-keep_all", "1"],
            # keep_all out of range
            ["-in_file", "a.txt", "-in_type", "ireg", "-out_dir", "out",
             "-out_type", "std_txt", "-keep_all", "2"],
            # unknown flag
            ["-in_file", "a.txt", "-in_type", "ireg", "-out_dir", "out",
             "-out_type", "std_txt", "-keep_all", "1", "-verbose"],
        ]
        for argv in bad_invocations:
            with self.assertRaises(SystemExit) as cm, redirect_stderr(StringIO()):
                main(argv)
            self.assertEqual(cm.exception.code, 2, argv)


if __name__ == "__main__":
    unittest.main()
