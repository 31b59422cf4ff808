"""Outline Builder: tests for the cached, thread-safe build path.

Tests cover:
    - Same (type, convention) returns the identical Outline
    - Different conventions / pluralizers get separate entries
    - Concurrent first builds converge on one Outline
    - ModelConflictError surfaces from build() and nothing is cached
    - Default convention comes from settings
"""

import logging
import threading

import pytest

from beanoutline.core.domain_types import ConventionKind
from beanoutline.core.errors import ModelConflictError
from beanoutline.services.outline_builder import (
    OutlineBuilder,
    build_outline,
    cached_outline_count,
)

from tests.beans import Box, ConflictingTypesBean, TestBeanClass


# ─── Caching ─────────────────────────────────────────────────────

def test_same_key_returns_cached_instance():
    first = OutlineBuilder(TestBeanClass).default_camel_cased().build()
    second = OutlineBuilder(TestBeanClass).default_camel_cased().build()
    assert first is second
    assert build_outline(TestBeanClass, ConventionKind.CAMEL) is first
    assert build_outline(TestBeanClass, "camel") is first


def test_conventions_are_cached_separately():
    camel = OutlineBuilder(TestBeanClass).default_camel_cased().build()
    snake = OutlineBuilder(TestBeanClass).default_snake_cased().build()
    assert camel is not snake
    assert snake.convention.kind is ConventionKind.SNAKE
    assert OutlineBuilder(TestBeanClass).with_convention("snake").build() is snake


def test_long_convention_spellings_are_accepted():
    snake = OutlineBuilder(TestBeanClass).default_snake_cased().build()
    assert OutlineBuilder(TestBeanClass).with_convention("snake_case").build() is snake
    assert build_outline(TestBeanClass, "snake_case") is snake
    assert build_outline(TestBeanClass, "camelCase").convention.kind is ConventionKind.CAMEL


def test_pluralizer_is_part_of_the_key():
    def shout(name):
        return name.upper()

    plain = OutlineBuilder(Box).default_camel_cased().build()
    custom = OutlineBuilder(Box).default_camel_cased().with_pluralizer(shout).build()
    assert plain is not custom
    assert plain.camel_cased_plural_name() == "Boxes"
    assert custom.camel_cased_plural_name() == "BOX"
    assert OutlineBuilder(Box).default_camel_cased().with_pluralizer(shout).build() is custom


def test_cache_grows_once_per_key():
    build_outline(Box, ConventionKind.SNAKE)
    count = cached_outline_count()
    build_outline(Box, ConventionKind.SNAKE)
    assert cached_outline_count() == count


def test_concurrent_builds_converge():
    class Racer:
        def getLap(self) -> int:
            return 1

    results = []
    barrier = threading.Barrier(8)

    def worker():
        barrier.wait()
        results.append(build_outline(Racer, ConventionKind.CAMEL))

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(results) == 8
    assert all(r is results[0] for r in results)


def test_default_convention_from_settings():
    assert build_outline(TestBeanClass) is build_outline(TestBeanClass, ConventionKind.CAMEL)
    assert OutlineBuilder(TestBeanClass).build().convention.kind is ConventionKind.CAMEL


# ─── Failures ────────────────────────────────────────────────────

def test_model_conflict_surfaces_and_is_not_cached(caplog):
    count = cached_outline_count()
    with caplog.at_level(logging.WARNING, logger="beanoutline"):
        with pytest.raises(ModelConflictError):
            OutlineBuilder(ConflictingTypesBean).build()
    assert cached_outline_count() == count
    assert any(
        getattr(r, "error_code", None) == "MODEL_CONFLICT" for r in caplog.records
    )


def test_build_rejects_non_classes():
    with pytest.raises(TypeError):
        build_outline(TestBeanClass())


def test_build_logs_at_debug(caplog):
    class Logged:
        def getName(self) -> str:
            return ""

    with caplog.at_level(logging.DEBUG, logger="beanoutline"):
        build_outline(Logged, ConventionKind.SNAKE)
    record = next(r for r in caplog.records if r.getMessage() == "Built outline for Logged")
    assert record.type_name == "Logged"
    assert record.convention == "snake"
    assert record.property_count == 1
