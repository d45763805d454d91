import os
import shutil
import tempfile
import unittest

from cpstt.utils.paths import GENERATOR_SUBDIR, TESTCASE_SUBDIR
from cpstt.utils.text import set_colors


class TestFixture(unittest.TestCase):
    def fixture_path(self):
        return None

    def setUp(self):
        set_colors(False)
        self.cwd_orig = os.getcwd()
        self.task_dir = tempfile.mkdtemp()

        if self.fixture_path():
            self.task_dir_orig = os.path.abspath(
                os.path.join(os.path.dirname(__file__), self.fixture_path())
            )
            # shutil.copytree() requires that the destination directory does not exist,
            os.rmdir(self.task_dir)
            shutil.copytree(self.task_dir_orig, self.task_dir)

        self.testcase_dir = os.path.join(
            self.task_dir, GENERATOR_SUBDIR, TESTCASE_SUBDIR
        )
        os.makedirs(self.testcase_dir, exist_ok=True)
        os.chdir(self.task_dir)

    def tearDown(self):
        os.chdir(self.cwd_orig)
        set_colors(True)
        shutil.rmtree(self.task_dir)

    def read(self, *path: str) -> str:
        with open(os.path.join(self.task_dir, *path)) as f:
            return f.read()

    def write(self, content: str, *path: str) -> None:
        with open(os.path.join(self.task_dir, *path), "w") as f:
            f.write(content)

    def log_files(self):
        """Log all files for checking whether new ones have been created."""
        self.original_files = os.listdir(self.testcase_dir)

    def created_files(self):
        """Test case files that are expected to be created."""
        return []

    def check_files(self):
        """Check whether exactly the expected test cases have been created."""
        self.assertEqual(
            sorted(os.listdir(self.testcase_dir)),
            sorted(self.original_files + self.created_files()),
        )
