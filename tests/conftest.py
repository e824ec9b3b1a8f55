"""Shared test fixtures."""

import os
import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from aliasdoc.config import LintSettings
from aliasdoc.lint import Linter
from aliasdoc.observability import configure_logging

configure_logging("WARNING")

TUTORIAL = '''\
# Type aliases in Kotlin and Java

Kotlin can give an existing type a second name.

```kotlin
class Person(var name: String, val id: Int) {
    fun getName(): String = name
    fun setName(value: String) { name = value }
}

typealias PersonSet = Set<Person>
typealias Predicate<T> = (T) -> Boolean
```

## The Java workaround

```java
public class PersonSet {
    private final Set<Person> people;

    public PersonSet(Set<Person> people) {
        this.people = people;
    }

    public boolean contains(Person person) {
        return people.contains(person);
    }
}
```

## Comparison

| Aspect | Kotlin typealias | Java wrapper |
|---|---|---|
| Runtime cost | None | One extra object per set |
| New type identity | No | Yes |
'''


@pytest.fixture
def tutorial_text() -> str:
    """A clean tutorial document with no findings."""
    return TUTORIAL


@pytest.fixture
def settings(monkeypatch) -> LintSettings:
    """Settings isolated from ALIASDOC_* variables in the environment."""
    for key in list(os.environ):
        if key.startswith("ALIASDOC_"):
            monkeypatch.delenv(key)
    return LintSettings(_env_file=None)


@pytest.fixture
def linter(settings) -> Linter:
    return Linter(settings)

