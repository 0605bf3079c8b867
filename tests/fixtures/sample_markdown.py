"""Sample markdown documents for testing.

These fixtures represent local files used for:
- Testing frontmatter extraction and validation
- Testing classification against the remote index
- Building source directories for sync runs
"""

# Minimal valid document
SAMPLE_MARKDOWN_MINIMAL = """---
title: Foo
---
Hello
"""

# Document using every supported frontmatter field
SAMPLE_MARKDOWN_FULL = """---
title: Shipping Python CLIs
published: true
tags: python, cli
date: 2021-01-01T00:00:00Z
series: Tooling
canonical_url: https://example.com/shipping-python-clis
cover_image: https://example.com/cover.png
---
# Shipping Python CLIs

Some content.
"""

# Draft with explicit published flag
SAMPLE_MARKDOWN_DRAFT = """---
title: Work In Progress
published: false
---
Not ready yet.
"""

# No frontmatter block at all
SAMPLE_MARKDOWN_NO_FRONTMATTER = """# Just a heading

No metadata here.
"""

# Frontmatter without a title
SAMPLE_MARKDOWN_NO_TITLE = """---
tags: python
---
Body
"""

# Frontmatter with a bad date
SAMPLE_MARKDOWN_BAD_DATE = """---
title: Foo
date: not-a-date
---
Body
"""
