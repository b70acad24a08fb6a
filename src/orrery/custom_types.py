"""Custom types used in orrery."""

import jax
from jaxtyping import Float

NFloatArray = Float[jax.Array, "n"]
Position = Float[jax.Array, "3"]
NPositions = Float[jax.Array, "n 3"]
