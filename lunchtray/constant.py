"""Editable static menu catalog."""

from __future__ import annotations

# Prices are strings so they parse into exact Decimal values in lunchtray.data.
MENU_ITEMS_BY_CATEGORY: dict[str, list[dict[str, str]]] = {
    "entree": [
        {
            "name": "Cauliflower",
            "description": "Whole cauliflower, brined, roasted, and deep fried",
            "price": "7.00",
            "image": "cauliflower",
        },
        {
            "name": "Three Bean Chili",
            "description": "Black beans, red beans, kidney beans, slow cooked, topped with onion",
            "price": "4.00",
            "image": "chili",
        },
        {
            "name": "Mushroom Pasta",
            "description": "Penne pasta, mushrooms, basil, with plum tomatoes cooked in garlic and olive oil",
            "price": "5.50",
            "image": "pasta",
        },
        {
            "name": "Spicy Black Bean Skillet",
            "description": "Seasonal vegetables, black beans, house spice blend, served with avocado and quick pickled onions",
            "price": "5.50",
            "image": "skillet",
        },
    ],
    "side_dish": [
        {
            "name": "Summer Salad",
            "description": "Heirloom tomatoes, butter lettuce, peaches, avocado, balsamic dressing",
            "price": "2.50",
            "image": "summer_salad",
        },
        {
            "name": "Butternut Squash Soup",
            "description": "Roasted butternut squash, roasted peppers, chili oil",
            "price": "3.00",
            "image": "squash_soup",
        },
        {
            "name": "Spicy Potatoes",
            "description": "Marble potatoes, roasted, and fried in house spice blend",
            "price": "2.00",
            "image": "potatoes",
        },
        {
            "name": "Coconut Rice",
            "description": "Rice, coconut milk, lime, and sugar",
            "price": "1.50",
            "image": "coconut_rice",
        },
    ],
    "accompaniment": [
        {
            "name": "Lunch Roll",
            "description": "Fresh baked roll made in house",
            "price": "0.50",
            "image": "lunch_roll",
        },
        {
            "name": "Mixed Berries",
            "description": "Strawberries, blueberries, raspberries, and huckleberries",
            "price": "1.00",
            "image": "mixed_berries",
        },
        {
            "name": "Pickled Veggies",
            "description": "Pickled cucumbers and carrots, made in house",
            "price": "0.50",
            "image": "pickled_veggies",
        },
    ],
}
