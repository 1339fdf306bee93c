"""Infrastructure layer: process locale and the system locale listing."""
