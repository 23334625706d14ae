"""
Application services layer (use cases).

Services orchestrate the domain logic to fulfill application use cases:
- normalizer: raw catalog -> DisplayRecord
- catalog: loading and normalization of the raw catalog into a repository

Services depend on ports (interfaces) from core/, never on concrete
implementations from adapters/.
"""
