"""
Tests for the default project environment.
"""

from pathlib import Path

from psydekick.host import ProjectEnvironment


class TestProjectEnvironment:
    def test_data_root_is_assets(self, unity_project: Path):
        assert ProjectEnvironment(unity_project).data_root == unity_project / "Assets"

    def test_index_empty_before_refresh(self, unity_project: Path):
        assert ProjectEnvironment(unity_project).indexed_files == frozenset()

    def test_refresh_indexes_project_files(self, unity_project: Path):
        env = ProjectEnvironment(unity_project)
        env.refresh_index()

        assert env.contains("Assets/Scripts/Player.cs")
        assert env.contains("ProjectSettings/ProjectVersion.txt")

    def test_refresh_skips_ignored_dirs(self, unity_project: Path):
        env = ProjectEnvironment(unity_project)
        env.refresh_index()
        assert not env.contains("Library/ArtifactDB")

    def test_refresh_picks_up_new_files(self, unity_project: Path):
        env = ProjectEnvironment(unity_project)
        env.refresh_index()
        assert not env.contains("Unity MCP Bridge/serverpath.txt")

        marker_dir = unity_project / "Unity MCP Bridge"
        marker_dir.mkdir()
        (marker_dir / "serverpath.txt").write_text("/x")
        env.refresh_index()

        assert env.contains("Unity MCP Bridge/serverpath.txt")

    def test_refresh_drops_deleted_files(self, unity_project: Path):
        env = ProjectEnvironment(unity_project)
        env.refresh_index()

        (unity_project / "Assets" / "Scripts" / "Player.cs").unlink()
        env.refresh_index()

        assert not env.contains("Assets/Scripts/Player.cs")
