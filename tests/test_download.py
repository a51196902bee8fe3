"""
Tests for Download and Parse

Tests for the cached remote file download and the line parsers.
"""

import pytest
import sys
from pathlib import Path
from unittest.mock import Mock
from urllib.parse import quote

import httpx

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from file_utils.api.client import RemoteFileClient
from file_utils.config import FileManagerConfig
from file_utils.exceptions import FileIOError, NetworkError
from file_utils.files.manager import FileManager
from file_utils.files.parsers import parse_csv_line, parse_text_line


BASE_URL = "https://files.example.com/exports"


def identity(file_extension, line):
    return line


@pytest.fixture
def remote():
    """Create a mock remote client."""
    return Mock(spec=RemoteFileClient)


@pytest.fixture
def manager(tmp_path, remote):
    settings = FileManagerConfig(upload_folder=tmp_path, allowed_extensions=("txt",))
    return FileManager(settings, remote_client=remote)


@pytest.fixture
def cache_dir(tmp_path):
    folder = tmp_path / "cache"
    folder.mkdir()
    return folder


class TestDownloadAndParse:
    """Tests for download_and_parse_file."""
    
    def test_cache_hit_skips_network(self, manager, remote, cache_dir):
        """Test that an existing local copy is used without fetching."""
        (cache_dir / "report.txt").write_text("local\ncopy\n")
        
        data = manager.download_and_parse_file(
            f"{BASE_URL}/report.txt", cache_dir, identity
        )
        
        assert data == ["local", "copy"]
        remote.fetch_text.assert_not_called()
    
    def test_cache_miss_fetches_once_and_persists(self, manager, remote, cache_dir):
        """Test that a missing file is fetched once and written before parsing."""
        url = f"{BASE_URL}/report.txt"
        remote.fetch_text.return_value = "remote\ncontent\n"
        seen = []
        
        def parser(file_extension, line):
            # The cache file must already exist when parsing starts
            seen.append((cache_dir / "report.txt").read_text())
            return line
        
        data = manager.download_and_parse_file(url, cache_dir, parser)
        
        assert data == ["remote", "content"]
        remote.fetch_text.assert_called_once_with(url)
        assert (cache_dir / "report.txt").read_text() == "remote\ncontent\n"
        assert seen[0] == "remote\ncontent\n"
    
    def test_second_call_uses_cache(self, manager, remote, cache_dir):
        """Test that repeated downloads of the same url fetch only once."""
        url = f"{BASE_URL}/report.txt"
        remote.fetch_text.return_value = "a\n"
        
        manager.download_and_parse_file(url, cache_dir, identity)
        manager.download_and_parse_file(url, cache_dir, identity)
        
        assert remote.fetch_text.call_count == 1
    
    def test_stops_at_first_blank_line(self, manager, remote, cache_dir):
        """Test that the first blank line ends processing."""
        remote.fetch_text.return_value = "a\nb\n\nc\n"
        
        data = manager.download_and_parse_file(
            f"{BASE_URL}/letters.txt", cache_dir, identity
        )
        
        assert data == ["a", "b"]
    
    def test_whitespace_only_line_ends_processing(self, manager, remote, cache_dir):
        """Test that a line of spaces counts as blank."""
        remote.fetch_text.return_value = "  a  \r\n \t \nb\n"
        
        data = manager.download_and_parse_file(
            f"{BASE_URL}/letters.txt", cache_dir, identity
        )
        
        assert data == ["a"]
    
    def test_falsy_results_dropped(self, manager, remote, cache_dir):
        """Test that lines the parser rejects are left out."""
        remote.fetch_text.return_value = "keep 1\nskip\nkeep 2\n"
        
        def parser(file_extension, line):
            return line if line.startswith("keep") else None
        
        data = manager.download_and_parse_file(
            f"{BASE_URL}/mixed.txt", cache_dir, parser
        )
        
        assert data == ["keep 1", "keep 2"]
    
    def test_parser_receives_extension(self, manager, remote, cache_dir):
        """Test that the parser is called with the file extension."""
        remote.fetch_text.return_value = "x\n"
        parser = Mock(return_value="parsed")
        
        manager.download_and_parse_file(f"{BASE_URL}/data.CSV?v=2", cache_dir, parser)
        
        parser.assert_called_once_with("CSV", "x")
    
    def test_file_name_url_decoded(self, manager, remote, cache_dir):
        """Test that the cached file name is url decoded."""
        remote.fetch_text.return_value = "x\n"
        
        manager.download_and_parse_file(
            f"{BASE_URL}/monthly%20report+2024.txt", cache_dir, identity
        )
        
        assert (cache_dir / "monthly report 2024.txt").is_file()
    
    def test_encoded_absolute_name_stays_in_cache(self, manager, remote, tmp_path, cache_dir):
        """Test that a name decoding to an absolute path is not read from outside the cache."""
        secret = tmp_path / "secret.txt"
        secret.write_text("top secret\n")
        remote.fetch_text.return_value = "remote\n"
        url = f"{BASE_URL}/" + quote(str(secret), safe="")
        
        # The nested folders do not exist under the cache folder
        with pytest.raises(FileIOError) as exc_info:
            manager.download_and_parse_file(url, cache_dir, identity)
        
        remote.fetch_text.assert_called_once_with(url)
        assert exc_info.value.path == cache_dir.joinpath(*secret.parts[1:])
        assert secret.read_text() == "top secret\n"
    
    def test_encoded_leading_separator_stripped(self, manager, remote, cache_dir):
        remote.fetch_text.return_value = "remote\n"
        
        data = manager.download_and_parse_file(
            f"{BASE_URL}/%2Freport.txt", cache_dir, identity
        )
        
        assert data == ["remote"]
        assert (cache_dir / "report.txt").read_text() == "remote\n"
    
    def test_empty_remote_file(self, manager, remote, cache_dir):
        """Test that an empty download is cached and yields nothing."""
        remote.fetch_text.return_value = ""
        
        data = manager.download_and_parse_file(
            f"{BASE_URL}/empty.txt", cache_dir, identity
        )
        
        assert data == []
        assert (cache_dir / "empty.txt").read_text() == ""
    
    def test_network_error_leaves_no_cache(self, manager, remote, cache_dir):
        """Test that a failed fetch fails the call without caching anything."""
        url = f"{BASE_URL}/report.txt"
        remote.fetch_text.side_effect = NetworkError("boom", url=url)
        
        with pytest.raises(NetworkError):
            manager.download_and_parse_file(url, cache_dir, identity)
        
        assert not (cache_dir / "report.txt").exists()
    
    def test_cache_write_failure(self, manager, remote, tmp_path):
        """Test that a cache folder that does not exist raises FileIOError."""
        remote.fetch_text.return_value = "a\n"
        
        with pytest.raises(FileIOError):
            manager.download_and_parse_file(
                f"{BASE_URL}/report.txt", tmp_path / "missing", identity
            )
    
    def test_with_http_client(self, tmp_path, cache_dir):
        """Test the download path end to end with a mocked transport."""
        calls = []
        
        def handler(request):
            calls.append(request)
            return httpx.Response(200, text='"id","name"\n"1","Ada"\n')
        
        client = RemoteFileClient(transport=httpx.MockTransport(handler))
        manager = FileManager(FileManagerConfig(tmp_path), remote_client=client)
        url = f"{BASE_URL}/people.csv"
        
        first = manager.download_and_parse_file(url, cache_dir, parse_csv_line)
        second = manager.download_and_parse_file(url, cache_dir, parse_csv_line)
        
        assert first == [["id", "name"], ["1", "Ada"]]
        assert second == first
        assert len(calls) == 1


class TestLineParsers:
    """Tests for the bundled line parsers."""
    
    def test_text_line(self):
        assert parse_text_line("txt", "hello world") == "hello world"
    
    def test_csv_quoted_fields(self):
        """Test splitting quoted csv fields."""
        assert parse_csv_line("csv", '"a","b, with comma","c"') == [
            "a", "b, with comma", "c"
        ]
    
    def test_csv_unquoted_fields(self):
        assert parse_csv_line("CSV", "1, 2,3") == ["1", "2", "3"]
    
    def test_csv_empty_fields_dropped(self):
        """Test that a line of empty fields parses to nothing."""
        assert parse_csv_line("csv", '"",""') is None
    
    def test_csv_parser_on_text_file(self):
        """Test that non-csv files fall back to plain lines."""
        assert parse_csv_line("txt", "a,b") == "a,b"


if __name__ == "__main__":
    pytest.main([__file__, "-v", "-s"])
