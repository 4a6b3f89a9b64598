"""Classic algorithms: transforms, polynomials, geometry, graphs, flows, strings and annealing."""

__version__ = "0.1.0"