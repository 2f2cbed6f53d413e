"""Regex for source links emitted by the documentation tool.

Format: /target/<path>?s=<start>:<end>#L<line>
The trailing line number is the tool's own guess and is ignored.
"""

import re

SOURCE_LINK_PATTERN = re.compile(r"/target/(?P<path>[^?#\s\"'<>]+)\?s=(?P<start>\d+):(?P<end>\d+)#L\d*")
