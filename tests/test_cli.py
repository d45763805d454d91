"""
Tests the command-line interface.
"""

import os
import shutil

import unittest
from io import StringIO
from unittest import mock

from util import TestFixture

from cpstt.__main__ import main


class TestCLI(TestFixture):
    def fixture_path(self):
        return "../fixtures/sample/"

    def args(self):
        return [["--plain", "version"]]

    def expect_failure(self):
        return False

    def runTest(self):
        self.log_files()

        with mock.patch("sys.stdout", new=StringIO()) as std_out:
            with mock.patch("sys.stderr", new=StringIO()) as std_err:
                for args_i in self.args():
                    result = main(args_i)

                    self.assertEqual(
                        bool(result),
                        self.expect_failure(),
                        f"Unexpected result of: {' '.join(args_i)}\n{std_err.getvalue()}",
                    )
        self.stdout = std_out.getvalue()
        self.stderr = std_err.getvalue()

        self.check_files()
        self.check_output()

    def check_output(self):
        pass


class TestCLIVersion(TestCLI):
    def check_output(self):
        self.assertIn("cpstt", self.stdout)


class TestCLIGenerate(TestCLI):
    def args(self):
        return [["generate", self.task_dir, "/test"]]

    def created_files(self):
        return [f"0_sample_0{i}.in" for i in range(4)]

    def check_output(self):
        self.assertEqual(self.read("test", "testcase", "0_sample_01.in"), "0 1\n")


class TestCLIGenerateSingle(TestCLI):
    def args(self):
        return [["generate", "--cases", "single", os.path.join(self.task_dir, "test")]]

    def created_files(self):
        return ["0_sample_00.in"]

    def check_output(self):
        self.assertEqual(self.read("test", "testcase", "0_sample_00.in"), "0 1\n")


class TestCLIGenerateMissingDir(TestCLI):
    def args(self):
        return [["generate", self.task_dir, "/missing"]]

    def check_output(self):
        self.assertEqual(self.stderr, "")


class TestCLIGenerateMissingDirStrict(TestCLI):
    def args(self):
        return [["--plain", "generate", "--strict", self.task_dir, "/missing"]]

    def expect_failure(self):
        return True

    def check_output(self):
        self.assertIn("Error: Could not write", self.stderr)


class TestCLIRun(TestCLI):
    def args(self):
        return [["--plain", "run"]]

    def created_files(self):
        return [f"0_sample_0{i}.in" for i in range(4)]

    def check_output(self):
        self.assertIn("Competitive Programming Stress Test Tools", self.stdout)
        # max_output_line=3 in the fixture settings
        self.assertIn("0_sample_02.in\n... (1 more lines)", self.stdout)
        self.assertEqual(self.read("test", "testcase", "0_sample_00.in"), "0 0\n")


class TestCLIRunNoLogo(TestCLI):
    def args(self):
        return [["--plain", "--root", self.task_dir, "run", "--no-logo"]]

    def created_files(self):
        return [f"0_sample_0{i}.in" for i in range(4)]

    def check_output(self):
        self.assertNotIn("Competitive Programming Stress Test Tools", self.stdout)


class TestCLIRunMissingGenerator(TestCLI):
    def args(self):
        return [["--plain", "run", "--generator", "test/gen.cpp"]]

    def expect_failure(self):
        return True

    def check_output(self):
        self.assertIn("does not exist", self.stderr)


class TestCLIRunInvalidSettings(TestCLI):
    def setUp(self):
        super().setUp()
        self.write("[execution]\nmax_output_len=-1\n", "settings")

    def args(self):
        return [["--plain", "run"]]

    def expect_failure(self):
        return True

    def check_output(self):
        self.assertIn("Invalid settings", self.stderr)


class TestCLIRunBroken(TestCLI):
    def fixture_path(self):
        return "../fixtures/broken/"

    def args(self):
        return [["--plain", "run", "--no-logo"]]

    def expect_failure(self):
        return True

    def check_output(self):
        self.assertIn("Error: testcase directory is missing", self.stderr)
        self.assertIn("It seems execution error", self.stderr)


class TestCLIRunMissingTestcaseDir(TestCLI):
    def fixture_path(self):
        return "../fixtures/broken/"

    def setUp(self):
        super().setUp()
        os.rmdir(self.testcase_dir)

    def args(self):
        return [["--plain", "run", "--no-logo"]]

    def expect_failure(self):
        return True

    def log_files(self):
        pass

    def check_files(self):
        self.assertFalse(os.path.exists(self.testcase_dir))

    def check_output(self):
        self.assertIn("Warning: Directory", self.stderr)


@unittest.skipIf(shutil.which("g++") is None, "g++ is not installed")
class TestCLIRunCpp(TestCLI):
    def fixture_path(self):
        return "../fixtures/cpp/"

    def args(self):
        return [["--plain", "run", "--no-logo", "--generator", "test/generator.cpp"]]

    def created_files(self):
        return [f"0_sample_0{i}.in" for i in range(4)]

    def check_output(self):
        self.assertIn("0_sample_03.in", self.stdout)
        self.assertEqual(self.read("test", "testcase", "0_sample_02.in"), "1 0\n")


@unittest.skipIf(shutil.which("g++") is None, "g++ is not installed")
class TestCLIRunCppCompileError(TestCLI):
    def fixture_path(self):
        return "../fixtures/cpp_broken/"

    def args(self):
        return [["--plain", "run", "--no-logo", "--generator", "test/generator.cpp"]]

    def expect_failure(self):
        return True

    def check_output(self):
        self.assertIn("It seems compile error", self.stderr)


class TestCLIRunMissingCompiler(TestCLI):
    def fixture_path(self):
        return "../fixtures/cpp/"

    def args(self):
        return [["--plain", "run", "--no-logo", "--generator", "test/generator.cpp"]]

    def expect_failure(self):
        return True

    def runTest(self):
        with mock.patch.dict(os.environ, {"PATH": "/nonexistent"}):
            super().runTest()

    def check_output(self):
        self.assertIn("Error: Could not run g++", self.stderr)


class TestCLIClean(TestCLI):
    def setUp(self):
        super().setUp()
        for name in ["0_sample_00.in", "0_sample_00.out"]:
            self.write("1 2\n", "test", "testcase", name)

    def args(self):
        return [["clean"]]

    def check_files(self):
        self.assertEqual(os.listdir(self.testcase_dir), [])


class TestCLICleanOtherFiles(TestCLI):
    def setUp(self):
        super().setUp()
        self.write("", "test", "testcase", "README")

    def args(self):
        return [["--plain", "clean"]]

    def expect_failure(self):
        return True

    def check_output(self):
        self.assertIn("could not be deleted", self.stderr)


class TestCLICleanDirectory(TestCLI):
    def setUp(self):
        super().setUp()
        os.mkdir(os.path.join(self.testcase_dir, "old.out"))

    def args(self):
        return [["--plain", "clean"]]

    def expect_failure(self):
        return True

    def check_output(self):
        self.assertIn("because it is a directory", self.stderr)
        self.assertIn("Error: Cleaning", self.stderr)


class TestCLICleanMissingDir(TestCLI):
    def args(self):
        return [["--plain", "clean", "--dir", "missing"]]

    def expect_failure(self):
        return True

    def check_output(self):
        self.assertIn("Error: Directory missing does not exist.", self.stderr)


if __name__ == "__main__":
    unittest.main(verbosity=2)
