"""Content Namer — verifies deterministic, stem-only, content-addressed filenames.

Tests:
    - Same input always yields the same filename
    - Directory and extension of the input are ignored
    - Hashing is case-sensitive
    - Empty/garbage references still produce a valid filename
"""

import hashlib

from catalog.core.content_namer import derive_image_filename, image_stem


def _sha(s: str) -> str:
    return hashlib.sha256(s.encode("utf-8")).hexdigest()


def test_derive_is_deterministic():
    assert derive_image_filename("/tmp/mug.jpg") == derive_image_filename("/tmp/mug.jpg")


def test_mug_scenario_hashes_the_stem():
    assert derive_image_filename("/tmp/mug.jpg") == _sha("mug") + ".jpg"


def test_directory_and_extension_are_irrelevant():
    assert derive_image_filename("/a/b/cat.png") == derive_image_filename("/x/cat.jpg")


def test_hashing_is_case_sensitive():
    assert derive_image_filename("cat") != derive_image_filename("Cat")


def test_windows_separators_are_path_segments():
    assert derive_image_filename("C:\\Users\\me\\cat.jpeg") == derive_image_filename("cat")


def test_only_last_extension_stripped():
    assert image_stem("/imgs/archive.tar.gz") == "archive.tar"


def test_empty_reference_hashes_empty_stem():
    assert derive_image_filename("") == _sha("") + ".jpg"


def test_trailing_slash_yields_empty_stem():
    assert image_stem("/some/dir/") == ""


def test_output_is_lowercase_hex_with_jpg_suffix():
    name = derive_image_filename("weird \u00e9 name?.bmp")
    stem, suffix = name[:-4], name[-4:]
    assert suffix == ".jpg"
    assert len(stem) == 64
    assert stem == stem.lower()
    int(stem, 16)
