"""Configuration for the 2D flocking demo."""

WINDOW = {
    "width": 1524,
    "height": 1024,
    "title": "Flocking Demo",
    "fps_limit": 60,
}

BOIDS = {
    "count": 300,
    "min_radius": 2,           # Inclusive
    "max_radius": 8,           # Exclusive
    "max_channel": 255,        # Color channels drawn from [0, max_channel)
    "default_color": (255, 0, 0),
}

# Steering constants. Fixed for the lifetime of a run.
STEERING = {
    "avoid_factor": 0.5,       # Separation weight
    "visual_range": 20.0,      # Surface-to-surface neighbor threshold
    "centering_factor": 0.0005,  # Cohesion weight
    "matching_factor": 0.05,   # Alignment weight
    "max_speed": 6.0,
    "min_speed": 1.0,
    "bias_val": 0.005,         # Destination blend weight
    "noise_strength": 0.1,     # Per-axis jitter amplitude
    "speed_epsilon": 1e-2,     # Guards the speed clamp division
}

RENDER = {
    "circle_segments": 12,
}

COLORS = {
    "background": (0.0, 0.0, 0.0, 1.0),
    "text": (230, 230, 230),
}

CONTROLS = {
    "reset_key": "r",
    "quit_key": "escape",
    "hud_key": "h",
}
