"""Tests for organizing by file type"""
import pytest

from file_by_type import build_extension_index, category_for, organize_by_type
from safe_move import DirectoryInvalid


def files_in(directory):
    return sorted(p.name for p in directory.iterdir() if p.is_file())


def test_dangerous_file_stays(make_files, settings):
    """report.exe is skipped, report.txt goes to Documents"""
    root = make_files("report.exe", "report.txt")
    report = organize_by_type(str(root), settings)

    assert files_in(root) == ["report.exe"]
    assert files_in(root / "Documents") == ["report.txt"]
    assert report.moved == 1
    assert report.skipped == 1
    assert report.skipped_names == ["report.exe"]
    assert "dangerous" in report.reason_for("report.exe")


def test_categories_and_other(make_files, settings):
    root = make_files("IMG_001.JPG", "song.mp3", "notes.md", "mystery.qqq", "README")
    report = organize_by_type(str(root), settings)

    assert files_in(root / "Images") == ["IMG_001.JPG"]
    assert files_in(root / "Audio") == ["song.mp3"]
    assert files_in(root / "Documents") == ["notes.md"]
    assert files_in(root / "Other") == ["README", "mystery.qqq"]
    assert report.moved == 5


def test_second_run_moves_nothing(make_files, settings):
    """Running twice in a row is a no-op the second time"""
    root = make_files("a.png", "b.pdf", "c.exe")
    organize_by_type(str(root), settings)
    second = organize_by_type(str(root), settings)

    assert second.moved == 0
    assert second.skipped_names == ["c.exe"]


def test_existing_destination_is_not_overwritten(make_files, settings):
    root = make_files("pic.png")
    (root / "Images").mkdir()
    (root / "Images" / "pic.png").write_text("original")

    report = organize_by_type(str(root), settings)

    assert (root / "Images" / "pic.png").read_text() == "original"
    assert files_in(root) == ["pic.png"]
    assert report.skipped_names == ["pic.png"]
    assert report.moved == 0


def test_dangerous_wins_over_category(make_files, settings):
    """.js is listed under Code but is never moved"""
    root = make_files("app.js")
    report = organize_by_type(str(root), settings)

    assert files_in(root) == ["app.js"]
    assert report.skipped == 1


def test_folder_creation_failure_skips_file(make_files, settings):
    """A file named Other blocks the Other folder"""
    root = make_files("Other")
    report = organize_by_type(str(root), settings)

    assert files_in(root) == ["Other"]
    assert report.skipped_names == ["Other"]
    assert any("Failed to create directory" in m for m in report.messages)


def test_subdirectories_are_left_alone(make_files, settings):
    root = make_files("stuff/inside.txt", "top.txt")
    organize_by_type(str(root), settings)

    assert (root / "stuff" / "inside.txt").exists()
    assert files_in(root / "Documents") == ["top.txt"]


def test_extension_index_last_category_by_name_wins():
    """Categories are visited alphabetically and the later one keeps the extension"""
    index = build_extension_index({"B": [".X", ".y"], "A": [".x", ".z"]})
    assert index == {".x": "B", ".y": "B", ".z": "A"}


def test_iso_goes_to_disk_images(make_files, settings):
    """.iso is listed under Archives and DiskImages; DiskImages keeps it"""
    root = make_files("disk.iso")
    organize_by_type(str(root), settings)

    assert (root / "DiskImages" / "disk.iso").exists()
    assert not (root / "Archives").exists()


def test_category_for_defaults_to_other():
    index = {".png": "Images"}
    assert category_for(".PNG", index) == "Images"
    assert category_for(".zzz", index) == "Other"
    assert category_for("", index) == "Other"


def test_invalid_directory(make_files, settings):
    root = make_files("plain.txt")
    with pytest.raises(DirectoryInvalid):
        organize_by_type(str(root / "plain.txt"), settings)
