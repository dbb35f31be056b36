"""
html-to-jsx Package.

Converts HTML fragments into equivalent JSX: attributes are renamed and
typed for the component framework, inline styles become objects, inline
event handlers become functions, and brace-delimited merge tags in text
(``{{ email }}``, ``{% if x %}``) are kept as annotated comments.

Usage
-----

Simple String Conversion
^^^^^^^^^^^^^^^^^^^^^^^^

.. code-block:: python

    import html_to_jsx
    print(html_to_jsx.html_to_jsx('<div class="a" tabindex="2"></div>'))
    # <div className="a" tabIndex={2} />

Advanced Usage (Engine)
^^^^^^^^^^^^^^^^^^^^^^^

.. code-block:: python

    from html_to_jsx import ConversionEngine, ConverterConfig

    engine = ConversionEngine(ConverterConfig(merge_tags=False))
    res = engine.run("<p>{{ name }}</p>")

    if res.success:
        print(res.code)
    else:
        print(f"Errors: {res.errors}")
"""

from typing import Optional

from html_to_jsx.config import ConverterConfig
from html_to_jsx.core.conversion_result import ConversionResult
from html_to_jsx.core.engine import ConversionEngine

__version__ = "0.1.0"


def html_to_jsx(html: str, config: Optional[ConverterConfig] = None) -> str:
  """
  Converts an HTML fragment to JSX source.

  This is a convenience wrapper around the `ConversionEngine`.

  Args:
      html (str): The markup to convert.
      config (ConverterConfig, optional): Conversion options.

  Returns:
      str: The JSX source.

  Raises:
      ValueError: If the markup cannot be represented as JSX (e.g. it
          contains a document type declaration).
  """
  result = ConversionEngine(config).run(html)

  if not result.success:
    error_msg = "\n".join(result.errors)
    raise ValueError(f"Conversion failed:\n{error_msg}")

  return result.code


__all__ = [
  "html_to_jsx",
  "ConversionEngine",
  "ConversionResult",
  "ConverterConfig",
  "__version__",
]
