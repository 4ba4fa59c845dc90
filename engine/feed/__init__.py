"""
Synthetic real-time log feed: periodic generation of fabricated log lines into an owned text buffer, with explicit start/stop handles.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from engine.feed.buffer import LogBuffer
from engine.feed.generator import SyntheticFeed, generate_line, start_feed, stop_feed

__all__ = ["LogBuffer", "SyntheticFeed", "generate_line", "start_feed", "stop_feed"]
