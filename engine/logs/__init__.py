"""
Log parsing and severity filtering: raw text is split into structured records carrying an embedded timestamp and level, and records below a minimum level are dropped.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from engine.logs.filtering import filter_by_level
from engine.logs.parser import LogRecord, parse

__all__ = ["LogRecord", "filter_by_level", "parse"]
