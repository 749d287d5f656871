#!/usr/bin/env python3
"""Consistency checks for the label registry and the aspect metadata built on it."""

from __future__ import annotations

import logging
from collections import Counter
from itertools import zip_longest
from typing import Iterable, Optional

from dotenv import load_dotenv

import aspects
import texts
from core import settings as core_settings
from helpers.errors import ConstantValueDefect
from logging_utils import init_logging

LOG = logging.getLogger("registry-check")

EXPECTED_PHASE_COUNT = 6


def _empty(group: str, values: Iterable[str]) -> list[str]:
    return [
        f"{group}[{index}] is empty"
        for index, value in enumerate(values)
        if not isinstance(value, str) or not value.strip()
    ]


def _duplicates(group: str, values: Iterable[str]) -> list[str]:
    counts = Counter(values)
    return [f"{group} repeats {value!r}" for value, count in counts.items() if count > 1]


def _aspect_defects() -> list[str]:
    defects: list[str] = []
    per_phase = (
        texts.INITIAL_DETAILS_FIELD_TITLES,
        texts.WORK_PROGRESS_FIELD_TITLES,
        texts.DEFINITION_FIELD_TITLES,
        texts.POST_PRODUCTION_FIELD_TITLES,
        texts.PUBLISHING_FIELD_TITLES,
        texts.POST_PUBLISH_FIELD_TITLES,
    )
    mappings = aspects.get_video_aspect_mappings()
    for mapping, phase_title, field_titles in zip_longest(mappings, texts.PHASE_TITLES, per_phase):
        if mapping is None:
            defects.append(f"phase title {phase_title!r} has no aspect mapping")
            continue
        if phase_title is None:
            defects.append(f"aspect {mapping.aspect_key} has no registered phase title")
        elif mapping.title != phase_title:
            defects.append(f"aspect {mapping.aspect_key} title {mapping.title!r} != {phase_title!r}")
        for field in mapping.fields:
            if field.title not in (field_titles or ()):
                defects.append(
                    f"aspect {mapping.aspect_key} field {field.field_key} title {field.title!r} "
                    "is not a registered field title"
                )
    return defects


def check_registry(min_error_length: Optional[int] = None) -> list[str]:
    """Return a description of every registry defect; empty when consistent."""

    if min_error_length is None:
        min_error_length = int(core_settings.settings.ERROR_TEXT_MIN_LENGTH)

    defects: list[str] = []
    defects += _empty("phase titles", texts.PHASE_TITLES)
    defects += _empty("menu titles", (texts.MENU_TITLE_ANALYSIS,))
    defects += _empty("messages", texts.MESSAGES)
    defects += _empty("errors", texts.ERROR_MESSAGES)
    defects += _empty("field titles", texts.FIELD_TITLES)

    if len(texts.PHASE_TITLES) != EXPECTED_PHASE_COUNT:
        defects.append(
            f"expected {EXPECTED_PHASE_COUNT} phase titles, got {len(texts.PHASE_TITLES)}"
        )
    defects += _duplicates("phase titles", texts.PHASE_TITLES)
    defects += _duplicates("field titles", texts.FIELD_TITLES)

    for value in texts.ERROR_MESSAGES:
        if isinstance(value, str) and value and len(value) < min_error_length:
            defects.append(f"error text too short: {value!r}")

    defects += _aspect_defects()
    return defects


def ensure_registry(min_error_length: Optional[int] = None) -> None:
    defects = check_registry(min_error_length)
    if defects:
        raise ConstantValueDefect(defects)


def main() -> int:
    load_dotenv(override=False)
    current = core_settings.reload_settings()
    init_logging("registry-check", current.LOG_LEVEL, json_logs=current.LOG_JSON)

    try:
        ensure_registry(current.ERROR_TEXT_MIN_LENGTH)
    except ConstantValueDefect as exc:
        for defect in exc.defects:
            LOG.error("defect: %s", defect, extra={"meta": {"defect": defect}})
        return 1

    LOG.info(
        "registry ok",
        extra={
            "meta": {
                "phase_titles": len(texts.PHASE_TITLES),
                "field_titles": len(texts.FIELD_TITLES),
                "messages": len(texts.MESSAGES) + len(texts.ERROR_MESSAGES),
            }
        },
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
