"""Tests for the catalog listing endpoint."""

import base64

from conftest import FAKE_JPEG


def test_lists_supported_files_only(client, make_song, catalog_dir):
    make_song("tagged.wav", title="Tagged", artist="Artist", album="Album", picture=FAKE_JPEG)
    make_song("plain.wav")
    (catalog_dir / "broken.flac").write_bytes(b"corrupt flac body" * 8)
    (catalog_dir / "cover.jpg").write_bytes(FAKE_JPEG)
    (catalog_dir / "playlist.m3u").write_text("#EXTM3U")

    response = client.get("/api/songs")

    assert response.status_code == 200
    assert response.headers["content-type"] == "application/json"
    songs = {song["filename"]: song for song in response.json()}
    assert sorted(songs) == ["broken.flac", "plain.wav", "tagged.wav"]


def test_song_record_shape(client, make_song):
    make_song("tagged.wav", title="Tagged", artist="Artist", album="Album", picture=FAKE_JPEG)

    song = client.get("/api/songs").json()[0]

    assert set(song) == {"filename", "title", "artist", "album", "artwork", "duration"}
    assert song["title"] == "Tagged"
    assert song["artist"] == "Artist"
    assert song["album"] == "Album"
    assert abs(song["duration"] - 1.0) < 0.01
    prefix = "data:image/jpeg;base64,"
    assert song["artwork"].startswith(prefix)
    assert base64.b64decode(song["artwork"][len(prefix):]) == FAKE_JPEG


def test_defaults_for_untagged_and_broken(client, make_song, catalog_dir):
    make_song("Just A Name.wav")
    (catalog_dir / "broken.mp3").write_bytes(b"zero frames here" * 8)

    songs = {song["filename"]: song for song in client.get("/api/songs").json()}

    assert songs["Just A Name.wav"]["title"] == "Just A Name"
    assert songs["Just A Name.wav"]["artist"] == "Unknown Artist"
    assert songs["Just A Name.wav"]["album"] == "Unknown Album"
    assert songs["Just A Name.wav"]["artwork"] is None
    assert songs["broken.mp3"] == {
        "filename": "broken.mp3",
        "title": "broken",
        "artist": "Unknown Artist",
        "album": "Unknown Album",
        "artwork": None,
        "duration": 0.0,
    }


def test_url_artwork_mode(client, make_song, library_config):
    library_config.artwork_mode = "url"
    make_song("with art.wav", picture=FAKE_JPEG)
    make_song("without.wav")

    songs = {song["filename"]: song for song in client.get("/api/songs").json()}

    assert songs["with art.wav"]["artwork"] == "/artwork/with%20art.wav"
    assert songs["without.wav"]["artwork"] is None


def test_empty_catalog(client):
    response = client.get("/api/songs")
    assert response.status_code == 200
    assert response.json() == []


def test_unreadable_catalog_returns_500(client, catalog_dir):
    catalog_dir.rmdir()

    response = client.get("/api/songs")

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to list songs"}


def test_repeated_listings_agree(client, make_song):
    make_song("a.wav", title="A")
    make_song("b.wav", picture=FAKE_JPEG)

    first = client.get("/api/songs").json()
    second = client.get("/api/songs").json()

    key = lambda song: song["filename"]
    assert sorted(first, key=key) == sorted(second, key=key)


def test_symlink_escape_not_listed(client, make_song, catalog_dir, tmp_path):
    outside = tmp_path / "outside.wav"
    make_song("inside.wav", title="Leaked").rename(outside)
    (catalog_dir / "link.wav").symlink_to(outside)
    make_song("kept.wav")

    songs = client.get("/api/songs").json()

    assert [song["filename"] for song in songs] == ["kept.wav"]
