"""Tokenize a small document into block tokens, then inline tokens."""

from vemi import BLOCK_TOKEN_TYPES, to_json, tokenize_blocks, tokenize_inline

SOURCE = """\
# Release notes

- Faster **block** scanning
1. See [the docs](https://example.org)

```python
print("hi")
```
"""

for token in tokenize_blocks(SOURCE):
    print(f"{token.position}\t{token.type}")
    content = getattr(token, "content", None)
    if content and token.type != "codeBlockContent":
        for inline in tokenize_inline(content):
            print(f"\t{inline.type}")

print(to_json(tokenize_inline("*hi*"), indent=2))
print(sorted(BLOCK_TOKEN_TYPES))
