"""
Tests for the server path marker file.
"""

from pathlib import Path

from psydekick.setup.marker import (
    ensure_marker_dir,
    get_marker_dir,
    get_marker_path,
    read_marker,
    write_marker,
)


class TestMarkerPaths:
    def test_marker_dir_is_sibling_of_data_root(self, unity_project: Path):
        data_root = unity_project / "Assets"
        assert get_marker_dir(data_root) == unity_project / "Unity MCP Bridge"

    def test_marker_file_name(self, unity_project: Path):
        path = get_marker_path(unity_project / "Assets")
        assert path.name == "serverpath.txt"
        assert path.parent.name == "Unity MCP Bridge"


class TestEnsureMarkerDir:
    def test_creates_missing_directory(self, temp_dir: Path):
        target = temp_dir / "a" / "Unity MCP Bridge"
        result = ensure_marker_dir(target)
        assert result.ok is True
        assert result.error is None
        assert target.is_dir()

    def test_existing_directory_is_ok(self, temp_dir: Path):
        target = temp_dir / "Unity MCP Bridge"
        target.mkdir()
        assert ensure_marker_dir(target).ok is True

    def test_file_in_the_way(self, temp_dir: Path):
        """Test an existing regular file is reported, not raised."""
        target = temp_dir / "Unity MCP Bridge"
        target.write_text("occupied")

        result = ensure_marker_dir(target)

        assert result.ok is False
        assert result.path == target
        assert result.error


class TestWriteAndRead:
    def test_write_then_read(self, unity_project: Path):
        data_root = unity_project / "Assets"
        get_marker_dir(data_root).mkdir()

        result = write_marker(get_marker_path(data_root), "/opt/UnityMcpServer/src")

        assert result.ok is True
        assert read_marker(data_root) == "/opt/UnityMcpServer/src"

    def test_write_into_missing_directory_fails(self, temp_dir: Path):
        result = write_marker(temp_dir / "missing" / "serverpath.txt", "/x")
        assert result.ok is False
        assert "No such file or directory" in result.error

    def test_read_missing_marker(self, unity_project: Path):
        assert read_marker(unity_project / "Assets") is None

    def test_unencodable_content_fails(self, temp_dir: Path):
        """Test encoding errors are reported like OS errors."""
        result = write_marker(temp_dir / "serverpath.txt", "/opt/\udcffUnityMcpServer/src")
        assert result.ok is False
        assert "surrogates not allowed" in result.error

    def test_null_byte_directory_fails(self, temp_dir: Path):
        result = ensure_marker_dir(temp_dir / "bad\x00dir")
        assert result.ok is False
        assert "null byte" in result.error
