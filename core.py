#!/usr/bin/env python3
"""
Spotify の "YourLibrary.json" エクスポートを読み込むコアモジュール。

イミュータブルな YourLibrary にデコードする:
- tracks / bannedTracks (artist / album / track / uri)
- albums (artist / album / uri)
- artists / bannedArtists (name / uri)
- shows / episodes / other（プレースホルダー、中身は無視）

HTML に出すのは tracks だけ。ほかのカテゴリはドキュメント全体を
デコードするために宣言しているだけ。
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Any, Dict, Tuple

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, model_validator


DEFAULT_LIBRARY_FILE = "YourLibrary.json"


def _none_as_empty_str(value: Any) -> Any:
    return "" if value is None else value


def _none_as_empty_tuple(value: Any) -> Any:
    return () if value is None else value


# null は空文字 / 空タプル扱い
Text = Annotated[str, BeforeValidator(_none_as_empty_str)]
_null_as_empty = BeforeValidator(_none_as_empty_tuple)


# =========================
# レコードモデル
# =========================


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)


class TrackItem(_Record):
    artist: Text = ""
    album: Text = ""
    track: Text = ""
    uri: Text = ""


class BannedTrackItem(TrackItem):
    pass


class AlbumItem(_Record):
    artist: Text = ""
    album: Text = ""
    uri: Text = ""


class ArtistItem(_Record):
    name: Text = ""
    uri: Text = ""


class BannedArtistItem(ArtistItem):
    pass


class ShowItem(_Record):
    pass


class EpisodeItem(_Record):
    pass


class OtherItem(_Record):
    pass


class YourLibrary(_Record):
    """
    The decoded export. Every category keeps the order of the source file.
    """

    tracks: Annotated[Tuple[TrackItem, ...], _null_as_empty] = ()
    banned_tracks: Annotated[Tuple[BannedTrackItem, ...], _null_as_empty] = Field(
        default=(), alias="bannedTracks"
    )
    albums: Annotated[Tuple[AlbumItem, ...], _null_as_empty] = ()
    artists: Annotated[Tuple[ArtistItem, ...], _null_as_empty] = ()
    banned_artists: Annotated[Tuple[BannedArtistItem, ...], _null_as_empty] = Field(
        default=(), alias="bannedArtists"
    )
    shows: Annotated[Tuple[ShowItem, ...], _null_as_empty] = ()
    episodes: Annotated[Tuple[EpisodeItem, ...], _null_as_empty] = ()
    other: Annotated[Tuple[OtherItem, ...], _null_as_empty] = ()

    @model_validator(mode="before")
    @classmethod
    def _null_document(cls, data: Any) -> Any:
        # トップレベルの null は {} と同じ
        return {} if data is None else data


# =========================
# 読み込み
# =========================


def load_library(path: Path) -> YourLibrary:
    """
    path を丸ごと読み込んで YourLibrary にデコードする。

    読めなければ OSError、JSON として不正・形が違う場合は
    pydantic.ValidationError を投げる。
    """
    raw = Path(path).read_bytes()
    return YourLibrary.model_validate_json(raw)


def library_counts(library: YourLibrary) -> Dict[str, int]:
    """Record count per category, keyed by the JSON field name."""
    counts: Dict[str, int] = {}
    for name, field in YourLibrary.model_fields.items():
        counts[field.alias or name] = len(getattr(library, name))
    return counts


# =========================
# 出力パス
# =========================


def html_output_path(path: Path) -> Path:
    """
    入力ファイル名の拡張子を .html に置き換えたパスを返す。

    例：
    - /music/export.json → /music/export.html
    - /music/data        → /music/data.html
    - /music/a.tar.gz    → /music/a.tar.html
    """
    path = Path(path)
    name = path.name
    dot = name.rfind(".")
    stem = name[:dot] if dot >= 0 else name
    return path.with_name(stem + ".html")
