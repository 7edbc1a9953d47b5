"""Quick start example: interpolate irregular samples and query the spline."""

import math

from pygridapprox import CubicInterpolation, LinearInterpolation

# Irregularly spaced samples of sin(x), deliberately unsorted
samples = [(3.1, math.sin(3.1)), (0.0, 0.0), (0.7, math.sin(0.7)),
           (1.9, math.sin(1.9)), (4.6, math.sin(4.6)), (2.4, math.sin(2.4)),
           (6.2, math.sin(6.2)), (5.3, math.sin(5.3))]

spline = CubicInterpolation(samples)
spline.build()

linear = LinearInterpolation(samples)
linear.build()

x = 1.0
print(f"\nExact:   {math.sin(x):.10f}")
print(f"Cubic:   {spline.get_value(x):.10f}")
print(f"Linear:  {linear.get_value(x):.10f}")

# Cell lookup and the polynomial used there
index = spline.get_index(x)
print(f"\nx={x} lies in cell {index}: {spline.get_polynom(index)}")

# Analytic derivative and integral
print(f"\nd/dx exact:   {math.cos(x):.10f}")
print(f"d/dx spline:  {spline.derivative(x):.10f}")
print(f"Integral over [{spline.left_bound}, {spline.right_bound}]: {spline.integrate():.10f}")

print()
print(spline)
