from __future__ import annotations

from typing import NewType

ProductId = NewType("ProductId", str)
CategoryId = NewType("CategoryId", str)
OfferId = NewType("OfferId", str)
