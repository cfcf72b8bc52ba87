from __future__ import annotations

import sys
import tempfile
import unittest
from pathlib import Path

PROJECT_SRC = Path(__file__).resolve().parents[1] / "src"
TOOLS_DIR = Path(__file__).resolve().parent / "tools"
for _p in (PROJECT_SRC, TOOLS_DIR):
    if str(_p) not in sys.path:
        sys.path.insert(0, str(_p))

from rsp_fixtures import touch_projects  # noqa: E402
from xbparams.discovery.project_locator import ProjectFileResolver  # noqa: E402
from xbparams.errors import NoProjectFileError, TooManyProjectFilesError  # noqa: E402
from xbparams.runtime.settings import ParserSettings  # noqa: E402


class ProjectFileResolverTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name)
        self.resolver = ProjectFileResolver(ParserSettings(bin_path=self.root, cwd=self.root))

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_single_positional_is_returned_unchecked(self) -> None:
        self.assertEqual(self.resolver.resolve(["does/not/exist.proj"]), "does/not/exist.proj")

    def test_two_positionals_fail(self) -> None:
        with self.assertRaises(TooManyProjectFilesError) as cm:
            self.resolver.resolve(["a.csproj", "b.csproj"])
        self.assertEqual(cm.exception.candidates, ("a.csproj", "b.csproj"))

    def test_no_candidates_fail(self) -> None:
        touch_projects(self.root, ["readme.txt", "x.proj", "x.fsxproj"])
        with self.assertRaises(NoProjectFileError) as cm:
            self.resolver.resolve([])
        self.assertEqual(cm.exception.directory, self.root)

    def test_single_candidate_selected(self) -> None:
        (proj,) = touch_projects(self.root, ["app.csproj"])
        self.assertEqual(self.resolver.resolve([]), str(proj))

    def test_search_is_not_recursive(self) -> None:
        touch_projects(self.root, ["sub/app.csproj"])
        with self.assertRaises(NoProjectFileError):
            self.resolver.resolve([])

    def test_directories_are_not_candidates(self) -> None:
        (self.root / "dir.csproj").mkdir()
        with self.assertRaises(NoProjectFileError):
            self.resolver.resolve([])

    def test_several_candidates_sorted_by_name(self) -> None:
        touch_projects(self.root, ["zeta.vbproj", "alpha.csproj", "mid.fsproj"])
        self.assertEqual(Path(self.resolver.resolve([])).name, "alpha.csproj")
        self.assertEqual(
            [p.name for p in self.resolver.candidates()],
            ["alpha.csproj", "mid.fsproj", "zeta.vbproj"],
        )

    def test_unsorted_listing_still_finds_candidates(self) -> None:
        touch_projects(self.root, ["b.csproj", "a.vbproj"])
        resolver = ProjectFileResolver(
            ParserSettings(bin_path=self.root, cwd=self.root, sort_candidates=False)
        )
        self.assertEqual({p.name for p in resolver.candidates()}, {"a.vbproj", "b.csproj"})
        self.assertIn(Path(resolver.resolve([])).name, {"a.vbproj", "b.csproj"})


if __name__ == "__main__":
    unittest.main()
