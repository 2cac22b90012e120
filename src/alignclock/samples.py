"""Sample inputs: the Lumoria system and the Tempora town clocks."""

from alignclock.models import Body, Star

LUMORIA_PLANETS: tuple[Body, ...] = (
    Body(name="Mercuria", distance=0.4, size=4879, color="#8ecae6"),
    Body(name="Earthia", distance=1.0, size=12742, color="#219ebc"),
    Body(name="Venusia", distance=0.7, size=12104, color="#ffb703"),
    Body(name="Marsia", distance=1.5, size=6779, color="#fb8500"),
)

LUMORIA_STAR = Star(name="Lumoria", x=100, y=150, radius=30, luminosity=1200)
ALTARIS_STAR = Star(name="Altaris", x=700, y=150, radius=20, luminosity=800)

LUMORIA_SYSTEM_NAME = "Lumoria System"

GRAND_CLOCK_TIME = "15:00"
TOWN_CLOCK_TIMES: tuple[str, ...] = ("14:45", "15:05", "15:00", "14:40")
