"""Website performance, accessibility and SEO audits."""

__version__ = "1.0.0"
