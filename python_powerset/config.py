"""
Global config object for the python_powerset package.
"""

# width, in bits, of the counter holding subset masks; a container of n elements needs n+1 bits:
mask_bits:int = 64
