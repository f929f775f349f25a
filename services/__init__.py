"""Search services: per-file processing, run orchestration, rendering, intake."""
