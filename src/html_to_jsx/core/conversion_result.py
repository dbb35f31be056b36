"""
Data structures representing the output of the conversion pipeline.

This module defines the `ConversionResult` Pydantic model, which encapsulates
the generated code, any errors encountered, and the warnings raised while
converting.
"""

from typing import List

from pydantic import BaseModel, Field


class ConversionResult(BaseModel):
  """
  Container for the results of a conversion job.
  """

  code: str = Field(default="", description="The generated JSX source.")
  errors: List[str] = Field(default_factory=list, description="List of error messages encountered.")
  warnings: List[str] = Field(default_factory=list, description="Recoverable problems, e.g. unparseable handlers.")
  success: bool = Field(
    default=True,
    description="True if the pipeline completed without fatal errors.",
  )

  @property
  def has_errors(self) -> bool:
    """
    Check if the result contains any error messages.

    Returns:
        True if one or more errors are present.
    """
    return len(self.errors) > 0
