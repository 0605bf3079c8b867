"""YAML frontmatter extraction and validation for markdown files.

This module splits a markdown document into its frontmatter block and body
and validates the fields the dev.to API understands:

    ---
    title: My post            # required, string
    published: false          # optional bool, absent means draft
    tags: python, devops      # optional string
    date: 2021-01-01T00:00:00Z  # optional RFC 3339 timestamp
    series: optional string
    canonical_url: optional string
    cover_image: optional string
    ---
    Body...

Validation happens before any network call so a bad document fails the run
without touching the remote account.
"""

import re
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional, Tuple
import yaml

from .errors import (
    InvalidDateError,
    MalformedFrontmatterError,
    MissingFrontmatterError,
    MissingTitleError,
)
from src.models.document import Frontmatter


class _FrontmatterLoader(yaml.SafeLoader):
    """SafeLoader with YAML 1.2 scalars for booleans and timestamps.

    Timestamps stay plain strings and only true/false spellings are
    booleans, so values like ``No`` or ``on`` load as strings.
    """


_FrontmatterLoader.yaml_implicit_resolvers = {
    first_char: [
        (tag, regexp) for tag, regexp in resolvers
        if tag not in ('tag:yaml.org,2002:timestamp', 'tag:yaml.org,2002:bool')
    ]
    for first_char, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
_FrontmatterLoader.add_implicit_resolver(
    'tag:yaml.org,2002:bool',
    re.compile(r'^(?:true|True|TRUE|false|False|FALSE)$'),
    list('tTfF'),
)


class FrontmatterHandler:
    """Handles YAML frontmatter operations for markdown files.

    Frontmatter format:
        - Opening ``---`` line at the top of the file (leading blank lines
          are tolerated)
        - A YAML mapping
        - Closing ``---`` line, followed by the document body
    """

    # Regex pattern to match YAML frontmatter (between --- delimiters)
    FRONTMATTER_PATTERN = re.compile(
        r'\A\s*---[ \t]*\r?\n(.*?)^---[ \t]*(?:\r?\n|\Z)',
        re.DOTALL | re.MULTILINE
    )

    # RFC 3339 date-time: 2021-01-01T00:00:00Z, 2021-01-01t00:00:00.5+02:00
    RFC3339_PATTERN = re.compile(
        r'^(\d{4})-(\d{2})-(\d{2})[Tt ](\d{2}):(\d{2}):(\d{2})(?:\.(\d+))?'
        r'(?:([Zz])|([+-])(\d{2}):(\d{2}))$',
        re.ASCII
    )

    REQUIRED_FIELDS = {'title'}

    OPTIONAL_STRING_FIELDS = ('tags', 'series', 'canonical_url', 'cover_image')

    # Maximum allowed depth for YAML structures to prevent DoS attacks
    MAX_YAML_DEPTH = 10

    @classmethod
    def _validate_yaml_depth(cls, file_path: str, obj, current_depth: int = 0) -> None:
        """Validate that YAML structure depth doesn't exceed maximum.

        Raises:
            MalformedFrontmatterError: If depth exceeds maximum
        """
        if current_depth > cls.MAX_YAML_DEPTH:
            raise MalformedFrontmatterError(
                file_path,
                f"YAML structure exceeds maximum depth of {cls.MAX_YAML_DEPTH}"
            )

        if isinstance(obj, dict):
            for value in obj.values():
                cls._validate_yaml_depth(file_path, value, current_depth + 1)
        elif isinstance(obj, list):
            for item in obj:
                cls._validate_yaml_depth(file_path, item, current_depth + 1)

    @classmethod
    def split(cls, file_path: str, content: str) -> Tuple[Dict[str, Any], str]:
        """Split content into the raw frontmatter mapping and the body.

        Args:
            file_path: Name of the file (for error messages)
            content: Full markdown content including frontmatter

        Returns:
            Tuple of (frontmatter_dict, body)

        Raises:
            MissingFrontmatterError: If there is no delimited block or it is empty
            MalformedFrontmatterError: If the block is not a YAML mapping
        """
        match = cls.FRONTMATTER_PATTERN.match(content)
        if not match:
            raise MissingFrontmatterError(file_path)

        frontmatter_str = match.group(1)
        body = content[match.end():]

        try:
            frontmatter = yaml.load(frontmatter_str, Loader=_FrontmatterLoader)
        except yaml.YAMLError as e:
            raise MalformedFrontmatterError(
                file_path,
                f"Invalid YAML syntax: {str(e)}"
            )

        if frontmatter is None:
            raise MissingFrontmatterError(file_path)

        if not isinstance(frontmatter, dict):
            raise MalformedFrontmatterError(
                file_path,
                f"Frontmatter must be a YAML dictionary, got {type(frontmatter).__name__}"
            )

        cls._validate_yaml_depth(file_path, frontmatter)

        return frontmatter, body

    @classmethod
    def extract(cls, file_path: str, content: str) -> Tuple[Frontmatter, str]:
        """Extract and validate frontmatter from markdown content.

        Args:
            file_path: Name of the file (for error messages)
            content: Full markdown content including frontmatter

        Returns:
            Tuple of (Frontmatter, body)

        Raises:
            MissingFrontmatterError: If there is no delimited block
            MalformedFrontmatterError: If the block is not a YAML mapping
            MissingTitleError: If title is absent or not a string
            InvalidDateError: If date is present but not RFC 3339
        """
        raw, body = cls.split(file_path, content)
        return cls.from_mapping(file_path, raw), body

    @classmethod
    def from_mapping(cls, file_path: str, raw: Dict[str, Any]) -> Frontmatter:
        """Validate a raw frontmatter mapping.

        Non-string values of optional string fields and non-bool values of
        ``published`` are ignored, as if the field were absent.

        Raises:
            MissingTitleError: If title is absent or not a string
            InvalidDateError: If date is present but not RFC 3339
        """
        def string(key: str) -> Optional[str]:
            value = raw.get(key)
            return value if isinstance(value, str) else None

        title = string('title')
        if title is None:
            raise MissingTitleError(file_path)

        published = raw.get('published')
        if not isinstance(published, bool):
            published = None

        date = string('date')
        if date is not None and not cls.is_valid_date(date):
            raise InvalidDateError(file_path, date)

        optional = {key: string(key) for key in cls.OPTIONAL_STRING_FIELDS}

        return Frontmatter(
            title=title,
            published=published,
            date=date,
            **optional
        )

    @classmethod
    def is_valid_date(cls, value: str) -> bool:
        """Check that value is an RFC 3339 date-time with a valid calendar date."""
        match = cls.RFC3339_PATTERN.match(value.strip())
        if not match:
            return False

        (year, month, day, hour, minute, second,
         _fraction, zulu, sign, off_hour, off_minute) = match.groups()

        try:
            if zulu:
                tz = timezone.utc
            elif int(off_minute) > 59:
                return False
            else:
                offset = timedelta(hours=int(off_hour), minutes=int(off_minute))
                tz = timezone(-offset if sign == '-' else offset)
            # RFC 3339 allows a leap second
            datetime(
                int(year), int(month), int(day),
                int(hour), int(minute), min(int(second), 59),
                tzinfo=tz,
            )
        except ValueError:
            return False

        return int(second) <= 60
