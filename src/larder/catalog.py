"""Built-in recipe catalog seeded into new kitchens."""

from __future__ import annotations

from typing import List

from larder.models.recipe import Nutrition, Recipe, RecipeIngredient

DEFAULT_RECIPES: List[Recipe] = [
    Recipe(
        id="chicken-stir-fry",
        name="Chicken and Broccoli Stir-Fry",
        ingredients=[
            RecipeIngredient(name="Chicken Breast", quantity=250, unit="g"),
            RecipeIngredient(name="Broccoli", quantity=150, unit="g"),
            RecipeIngredient(name="Bell Pepper", quantity=1, unit="piece"),
            RecipeIngredient(name="Soy Sauce", quantity=30, unit="ml"),
            RecipeIngredient(name="Rice", quantity=100, unit="g"),
        ],
        instructions=[
            "Cook the rice according to the package instructions.",
            "Slice the chicken and stir-fry until golden.",
            "Add broccoli and pepper and cook until crisp-tender.",
            "Toss with soy sauce and serve over rice.",
        ],
        prep_time=15,
        cook_time=15,
        servings=2,
        nutrition=Nutrition(calories=520, protein=42, carbs=55, fat=12, fiber=6),
        tags=["quick", "high-protein"],
    ),
    Recipe(
        id="salmon-rice-bowl",
        name="Teriyaki Salmon Rice Bowl",
        ingredients=[
            RecipeIngredient(name="Salmon Fillet", quantity=200, unit="g"),
            RecipeIngredient(name="Rice", quantity=100, unit="g"),
            RecipeIngredient(name="Teriyaki Sauce", quantity=40, unit="ml"),
            RecipeIngredient(name="Peas", quantity=80, unit="g"),
        ],
        instructions=[
            "Cook the rice.",
            "Glaze the salmon with teriyaki sauce and bake for 12 minutes.",
            "Steam the peas and assemble the bowls.",
        ],
        prep_time=10,
        cook_time=20,
        servings=2,
        nutrition=Nutrition(calories=610, protein=38, carbs=62, fat=20, fiber=5),
        tags=["pescatarian", "high-protein"],
    ),
    Recipe(
        id="beef-bolognese",
        name="Beef Bolognese",
        ingredients=[
            RecipeIngredient(name="Ground Beef", quantity=250, unit="g"),
            RecipeIngredient(name="Pasta", quantity=200, unit="g"),
            RecipeIngredient(name="Tomato Sauce", quantity=300, unit="ml"),
            RecipeIngredient(name="Onion", quantity=1, unit="piece"),
        ],
        instructions=[
            "Brown the beef with the diced onion.",
            "Add the tomato sauce and simmer for 20 minutes.",
            "Cook the pasta and toss with the sauce.",
        ],
        prep_time=10,
        cook_time=30,
        servings=2,
        nutrition=Nutrition(calories=720, protein=40, carbs=80, fat=24, fiber=7),
        tags=["comfort", "family"],
    ),
    Recipe(
        id="veggie-fried-rice",
        name="Vegetable Fried Rice",
        ingredients=[
            RecipeIngredient(name="Rice", quantity=150, unit="g"),
            RecipeIngredient(name="Peas", quantity=80, unit="g"),
            RecipeIngredient(name="Eggs", quantity=2, unit="piece"),
            RecipeIngredient(name="Soy Sauce", quantity=20, unit="ml"),
        ],
        instructions=[
            "Fry the cooked rice until lightly crisp.",
            "Push aside, scramble the eggs, then stir through.",
            "Add peas and soy sauce and heat through.",
        ],
        prep_time=10,
        cook_time=10,
        servings=2,
        nutrition=Nutrition(calories=450, protein=16, carbs=70, fat=11, fiber=5),
        tags=["vegetarian", "quick"],
    ),
    Recipe(
        id="cheesy-broccoli-pasta",
        name="Cheesy Broccoli Pasta",
        ingredients=[
            RecipeIngredient(name="Pasta", quantity=200, unit="g"),
            RecipeIngredient(name="Broccoli", quantity=200, unit="g"),
            RecipeIngredient(name="Cheddar Cheese", quantity=100, unit="g"),
            RecipeIngredient(name="Milk", quantity=150, unit="ml"),
        ],
        instructions=[
            "Boil the pasta, adding the broccoli for the last 3 minutes.",
            "Melt the cheese into warm milk.",
            "Drain and toss with the cheese sauce.",
        ],
        prep_time=5,
        cook_time=15,
        servings=2,
        nutrition=Nutrition(calories=640, protein=28, carbs=78, fat=22, fiber=6),
        tags=["vegetarian", "family"],
    ),
    Recipe(
        id="lemon-herb-chicken",
        name="Lemon Herb Roast Chicken",
        ingredients=[
            RecipeIngredient(name="Chicken Thighs", quantity=400, unit="g"),
            RecipeIngredient(name="Lemon", quantity=1, unit="piece"),
            RecipeIngredient(name="Potatoes", quantity=300, unit="g"),
            RecipeIngredient(name="Garlic", quantity=3, unit="clove"),
        ],
        instructions=[
            "Toss chicken and potatoes with lemon, garlic and herbs.",
            "Roast at 200C for 40 minutes.",
        ],
        prep_time=10,
        cook_time=40,
        servings=2,
        nutrition=Nutrition(calories=580, protein=44, carbs=35, fat=26, fiber=4),
        tags=["gluten-free", "family"],
    ),
]

__all__ = ["DEFAULT_RECIPES"]
