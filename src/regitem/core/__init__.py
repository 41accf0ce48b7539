"""
Core package for regitem contracts (fields, kinds, values, items, codec, hashing).

## Contracts (single source of truth)
- Grammar: compiled patterns for every pattern-checked datatype.
- Field: `Fieldname`, the `[a-z-]` key type.
- Kind: datatype names used to request validation.
- Value: the closed union of value variants and `parse(raw, kind)`.
- Item: ordered Fieldname -> Value mapping.
- Codec: canonical JSON `to_json` / `from_json`.
- Digest/Hashing: SHA-256 helpers, item hash and id, canonicality check.
- Errors: the typed error taxonomy.

## Notes
- Zero-IO policy: stdlib + pydantic + markdown-it-py only; no file/network IO.
- Every operation is pure; independent items may be hashed from several threads
  without coordination.

## Examples
```python
from regitem.core.codec import from_json
from regitem.core.kind import Kind
from regitem.core.value import parse

item = from_json('{"foo": "abc", "bar": "xyz"}')
item.to_json()   # '{"bar":"xyz","foo":"abc"}'
item.id()        # 'sha-256:5dd4fe3b...'
parse("sha-256:" + "0" * 64, Kind.HASH)
```
"""
