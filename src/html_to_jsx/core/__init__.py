"""
Core Package.

Contains the conversion logic:
- Merge-tag tokenizer
- Attribute rule tables and conversion engine
- HTML parsing and JSX output trees
- Tree-to-template builder and orchestration engine
"""
