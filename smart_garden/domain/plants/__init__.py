"""
Domain Layer for Plants
=======================
"""

from smart_garden.domain.plants.plant_entity import FloweringPlant, Plant, PlantDeath, VegetablePlant

__all__ = [
    "FloweringPlant",
    "Plant",
    "PlantDeath",
    "VegetablePlant",
]
