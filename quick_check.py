"""
Quick Check Script

Runs a minimal check that the package is installed and working,
using a temporary folder. Pass a URL to also try a real download.
"""

import sys
import tempfile
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent / "src"))


def check_imports():
    """Check that all modules can be imported."""
    print("Checking imports...")
    
    from file_utils.config import config
    print("  [OK] config")
    
    from file_utils.api.client import RemoteFileClient
    print("  [OK] api.client")
    
    from file_utils.files.manager import FileManager
    print("  [OK] files.manager")
    
    from file_utils.files.folders import FolderLister
    print("  [OK] files.folders")
    
    print("\nAll imports successful!")
    return True


def check_local_files(workdir: Path):
    """Check writing, reading, copying, searching and deleting."""
    print("\nChecking local file operations...")
    
    from file_utils import FileManager, FileManagerConfig, WriteMode
    
    manager = FileManager(FileManagerConfig(workdir, ("txt",), 10))
    
    note = workdir / "notes" / "note.txt"
    note.parent.mkdir()
    manager.write_local_file("first line\n", note)
    manager.write_local_file("second line\n", note, WriteMode.APPEND)
    assert manager.read_local_file(note) == "first line\nsecond line\n"
    print("  [OK] write and read")
    
    copy = workdir / "copy.txt"
    manager.copy_file(note, copy)
    print("  [OK] copy")
    
    found = manager.search_file([workdir], "note.txt")
    assert found == str(note.absolute())
    print(f"  [OK] search found {found}")
    
    manager.delete_local_file(copy)
    print("  [OK] delete")
    
    return True


def check_upload(workdir: Path):
    """Check promoting a staged upload."""
    print("\nChecking upload...")
    
    from file_utils import FileManager, FileManagerConfig, UploadDescriptor
    
    uploads = workdir / "uploads"
    uploads.mkdir()
    staged = workdir / "upload_tmp"
    staged.write_bytes(b"id,name\n1,Ada\n")
    
    manager = FileManager(FileManagerConfig(uploads, ("csv",), 10))
    path = manager.upload_file(
        UploadDescriptor(name="people.csv", size=staged.stat().st_size, tmp_path=staged)
    )
    print(f"  [OK] uploaded to {path}")
    
    return True


def check_download(workdir: Path, url: str):
    """Check downloading and parsing a remote file."""
    print(f"\nChecking download of {url}...")
    
    from file_utils import FileManager, FileManagerConfig
    from file_utils.files import parse_csv_line
    
    manager = FileManager(FileManagerConfig(workdir))
    lines = manager.download_and_parse_file(url, workdir, parse_csv_line)
    print(f"  [OK] parsed {len(lines)} lines")
    
    return True


def main():
    """Run all quick checks."""
    print("=" * 50)
    print("File Utilities - Quick Check")
    print("=" * 50)
    
    from file_utils.log import setup_logging
    setup_logging("DEBUG", log_to_file=False)
    
    try:
        check_imports()
        with tempfile.TemporaryDirectory() as tmp:
            workdir = Path(tmp)
            check_local_files(workdir)
            check_upload(workdir)
            if len(sys.argv) > 1:
                check_download(workdir, sys.argv[1])
        
        print("\n" + "=" * 50)
        print("All checks passed! [OK]")
        print("=" * 50)
        
    except Exception as e:
        print(f"\n[FAIL] Check failed: {e}")
        import traceback
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
