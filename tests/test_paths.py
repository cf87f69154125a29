from zipic_mcp.paths import output_name, predict_output_path, predict_output_paths


def test_alongside_original() -> None:
    assert predict_output_paths(["/a/b/photo.jpg"]) == ["/a/b/photo-compressed.jpg"]


def test_order_is_preserved() -> None:
    targets = ["/z/last.png", "/a/first.webp", "/m/mid.heic"]
    assert predict_output_paths(targets) == [
        "/z/last-compressed.png",
        "/a/first-compressed.webp",
        "/m/mid-compressed.heic",
    ]


def test_custom_directory_replaces_parent() -> None:
    paths = predict_output_paths(["/x/img.png", "/y/z/other.jpg"], "/out")
    assert paths == ["/out/img-compressed.png", "/out/other-compressed.jpg"]


def test_custom_directory_trailing_slash() -> None:
    assert predict_output_path("/x/img.png", "/out/") == "/out/img-compressed.png"


def test_name_transform_matches_across_placements() -> None:
    beside = predict_output_path("/x/y/img.png")
    custom = predict_output_path("/x/y/img.png", "/elsewhere")
    assert beside.rsplit("/", 1)[1] == custom.rsplit("/", 1)[1]


def test_only_final_extension_is_split() -> None:
    assert output_name("/data/archive.tar.gz") == "archive.tar-compressed.gz"


def test_no_extension() -> None:
    assert predict_output_paths(["/a/b/folder"]) == ["/a/b/folder-compressed"]
    assert output_name("/a/.hidden") == ".hidden-compressed"


def test_directory_target_with_trailing_slash() -> None:
    assert predict_output_paths(["/a/b/pictures/"]) == ["/a/b/pictures-compressed"]


def test_default_directory_cannot_be_predicted() -> None:
    assert predict_output_paths(["/a/b/photo.jpg"], use_default_directory=True) == []


def test_custom_suffix_is_not_consulted() -> None:
    # The fixed "-compressed" marker is used regardless of any requested suffix.
    assert output_name("/a/photo.jpg").endswith("-compressed.jpg")
