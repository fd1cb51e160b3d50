"""
Static vocabularies and conversion tables.

Everything here is plain data: word lists for the vocabulary matcher, the
measure alias table, and the cup/gram conversion factors used by the unit
normalizer. Swap or extend these tables without touching the matching logic.
"""

# --- Numbers ---

# Unicode vulgar fractions -> "n/d" marker used during sanitization
FRACTIONS = {
    "½": "1/2",
    "¼": "1/4",
    "¾": "3/4",
    "⅛": "1/8",
    "⅜": "3/8",
    "⅝": "5/8",
    "⅞": "7/8",
    "⅔": "2/3",
    "⅓": "1/3",
}

FRACTION_VALUES = {
    "½": 1 / 2,
    "¼": 1 / 4,
    "¾": 3 / 4,
    "⅛": 1 / 8,
    "⅜": 3 / 8,
    "⅝": 5 / 8,
    "⅞": 7 / 8,
    "⅔": 2 / 3,
    "⅓": 1 / 3,
}

WORD_NUMBERS = {
    "zero": 0, "one": 1, "two": 2, "three": 3, "four": 4,
    "five": 5, "six": 6, "seven": 7, "eight": 8, "nine": 9,
    "ten": 10, "eleven": 11, "twelve": 12, "thirteen": 13,
    "fourteen": 14, "fifteen": 15, "sixteen": 16, "seventeen": 17,
    "eighteen": 18, "nineteen": 19, "twenty": 20, "thirty": 30,
    "forty": 40, "fifty": 50, "sixty": 60, "seventy": 70,
    "eighty": 80, "ninety": 90, "hundred": 100,
    # Indefinite quantifiers
    "a": 1, "an": 1, "couple": 2, "few": 3, "several": 3,
    "half": 0.5, "quarter": 0.25,
}

DECIMAL_NUMBERS = [
    "0.25", "0.5", "0.75", ".25", ".5", ".75",
    "1.25", "1.5", "1.75", "2.5", "3.5", "4.5",
]

# Integers above this are left to the leading-number regex in the quantity parser
MAX_NUMBER_WORD = 1000

NUMBERS = (
    list(FRACTION_VALUES)
    + list(WORD_NUMBERS)
    + [str(i) for i in range(MAX_NUMBER_WORD + 1)]
    + DECIMAL_NUMBERS
)


# --- Measures ---

# Spelling as found in recipes -> canonical measure name
MEASURES = {
    # Volume
    "tablespoon": "tbl",
    "tablespoons": "tbl",
    "tbsp": "tbl",
    "tbsps": "tbl",
    "tbs": "tbl",
    "tbl": "tbl",
    "tbls": "tbl",
    "teaspoon": "tsp",
    "teaspoons": "tsp",
    "tsp": "tsp",
    "tsps": "tsp",
    "cup": "cup",
    "cups": "cup",
    "pint": "pint",
    "pints": "pint",
    "pt": "pint",
    "quart": "quart",
    "quarts": "quart",
    "qt": "quart",
    "gallon": "gallon",
    "gallons": "gallon",
    "gal": "gallon",
    "milliliter": "milliliter",
    "milliliters": "milliliter",
    "millilitre": "milliliter",
    "millilitres": "milliliter",
    "ml": "milliliter",
    "liter": "liter",
    "liters": "liter",
    "litre": "liter",
    "litres": "liter",
    "fluid ounce": "fluid ounce",
    "fluid ounces": "fluid ounce",
    "fl oz": "fluid ounce",
    "can": "can",
    "cans": "can",
    "stick": "stick",
    "sticks": "stick",
    "pinch": "pinch",
    "pinches": "pinch",
    "dash": "dash",
    "dashes": "dash",
    # Weight
    "ounce": "ounce",
    "ounces": "ounce",
    "oz": "ounce",
    "gram": "gram",
    "grams": "gram",
    "g": "gram",
    "gr": "gram",
    "kilogram": "kilogram",
    "kilograms": "kilogram",
    "kg": "kilogram",
    "pound": "pound",
    "pounds": "pound",
    "lb": "pound",
    "lbs": "pound",
    # Count-like
    "clove": "clove",
    "cloves": "clove",
    "slice": "slice",
    "slices": "slice",
    "piece": "piece",
    "pieces": "piece",
    "package": "package",
    "packages": "package",
    "bunch": "bunch",
    "bunches": "bunch",
    "sprig": "sprig",
    "sprigs": "sprig",
    "head": "head",
    "heads": "head",
    "handful": "handful",
    "handfuls": "handful",
    "sheet": "sheet",
    "sheets": "sheet",
}

# Volume measure -> cups
CUP_CONVERSIONS = {
    "tbl": 0.0625,
    "tsp": 0.020833,
    "cup": 1.0,
    "pint": 2.0,
    "quart": 4.0,
    "gallon": 16.0,
    "milliliter": 0.00423,
    "liter": 4.23,
    "fluid ounce": 0.125,
    "can": 1.75,
    "stick": 0.5,
    "pinch": 0.0013,
    "dash": 0.0026,
}

# Weight measure -> grams
GRAM_CONVERSIONS = {
    "ounce": 28.3495,
    "gram": 1.0,
    "kilogram": 1000.0,
    "pound": 453.592,
}

# Ingredients measured as whole items -> cups per item
INGREDIENT_CUPS = {
    "egg": 0.125,
    "lime": 0.125,
    "lemon": 0.1875,
    "orange": 0.281,
    "egg yolk": 0.0625,
    "garlic": 0.0280833,
    "chicken": 3,
    "celery": 0.5,
    "onion": 1,
    "carrot": 1,
    "butter": 0.5,
}

# Density in grams per cup
DENSITIES = {
    "flour": 125,
    "all purpose flour": 125,
    "bread flour": 130,
    "cake flour": 114,
    "whole wheat flour": 120,
    "almond flour": 96,
    "rye flour": 102,
    "cornstarch": 128,
    "cornmeal": 138,
    "sugar": 200,
    "granulated sugar": 200,
    "brown sugar": 220,
    "powdered sugar": 120,
    "confectioners sugar": 120,
    "cocoa powder": 85,
    "baking soda": 220,
    "baking powder": 192,
    "salt": 292,
    "kosher salt": 240,
    "sea salt": 260,
    "butter": 227,
    "peanut butter": 258,
    "almond butter": 250,
    "tahini": 256,
    "miso paste": 275,
    "gochujang": 300,
    "honey": 340,
    "maple syrup": 322,
    "molasses": 328,
    "water": 236,
    "milk": 245,
    "buttermilk": 245,
    "heavy cream": 238,
    "sour cream": 230,
    "yogurt": 245,
    "greek yogurt": 245,
    "cream cheese": 232,
    "olive oil": 216,
    "vegetable oil": 218,
    "canola oil": 218,
    "coconut oil": 218,
    "oil": 218,
    "soy sauce": 255,
    "fish sauce": 288,
    "rice": 185,
    "brown rice": 190,
    "quinoa": 170,
    "rolled oats": 90,
    "oats": 90,
    "panko breadcrumbs": 60,
    "breadcrumbs": 108,
    "chocolate chips": 170,
    "walnuts": 120,
    "pecans": 110,
    "almonds": 143,
    "pistachios": 123,
    "peanuts": 146,
    "raisins": 145,
    "parmesan cheese": 100,
    "cheddar cheese": 113,
    "mozzarella cheese": 113,
    "feta cheese": 150,
    "spinach": 30,
    "shredded coconut": 93,
}

FRUITS = {
    "apple", "apricot", "avocado", "banana", "blackberry", "blueberry",
    "cantaloupe", "cherry", "coconut", "cranberry", "date", "fig", "grape",
    "grapefruit", "kiwi", "lemon", "lime", "mango", "nectarine", "orange",
    "papaya", "peach", "pear", "pineapple", "plum", "pomegranate",
    "raisin", "raspberry", "strawberry", "watermelon",
}

VEGETABLES = {
    "artichoke", "arugula", "asparagus", "beet", "bell pepper", "bok choy",
    "broccoli", "brussels sprout", "cabbage", "carrot", "cauliflower",
    "celery", "chard", "cherry tomato", "chili pepper", "corn", "cucumber",
    "eggplant", "fennel", "grape tomato", "green bean", "green onion",
    "jalapeno", "kale", "leek", "lettuce", "mushroom", "okra", "onion",
    "parsnip", "pea", "potato", "pumpkin", "radish", "red onion", "scallion",
    "shallot", "spinach", "squash", "sweet potato", "tomato", "turnip",
    "zucchini",
}

HERBS = {
    "basil", "bay leaf", "chives", "cilantro", "dill", "lemongrass",
    "marjoram", "mint", "oregano", "parsley", "rosemary", "sage",
    "tarragon", "thyme",
}

# Herb sprig/bunch -> roughly a teaspoon
HERB_CUPS = 0.0208333


# --- Ingredients ---

_PANTRY = [
    "all purpose flour", "almond flour", "bread flour", "cake flour", "flour",
    "rye flour", "whole wheat flour", "self rising flour", "cornstarch",
    "cornmeal", "semolina", "sugar", "granulated sugar", "brown sugar",
    "light brown sugar", "dark brown sugar", "powdered sugar",
    "confectioners sugar", "caster sugar", "coconut sugar", "honey",
    "maple syrup", "molasses", "corn syrup", "agave", "cocoa powder",
    "chocolate", "dark chocolate", "chocolate chips", "vanilla",
    "vanilla extract", "almond extract", "baking soda", "baking powder",
    "yeast", "active dry yeast", "instant yeast", "gelatin", "salt",
    "kosher salt", "sea salt", "table salt", "pepper", "black pepper",
    "white pepper", "peppercorns", "water", "breadcrumbs",
    "panko breadcrumbs", "crackers", "graham crackers", "oats",
    "rolled oats", "rice", "brown rice", "white rice", "basmati rice",
    "jasmine rice", "arborio rice", "quinoa", "couscous", "bulgur",
    "barley", "lentils", "chickpeas", "black beans", "kidney beans",
    "pinto beans", "white beans", "cannellini beans", "pasta", "spaghetti",
    "penne", "macaroni", "lasagna noodles", "egg noodles", "noodles",
    "soba noodles", "rice noodles", "ramen noodles", "udon noodles",
    "tortillas", "flour tortillas", "corn tortillas", "bread",
    "sourdough bread", "pita", "nori", "tofu", "tempeh",
]

_DAIRY = [
    "butter", "unsalted butter", "salted butter", "ghee", "milk",
    "whole milk", "skim milk", "buttermilk", "plant milk", "almond milk",
    "oat milk", "soy milk", "coconut milk", "full fat coconut milk",
    "coconut cream", "cream", "heavy cream", "whipping cream", "sour cream",
    "half and half", "yogurt", "greek yogurt", "cream cheese", "cheese",
    "cheddar cheese", "parmesan cheese", "parmesan", "mozzarella cheese",
    "mozzarella", "feta cheese", "feta", "ricotta cheese", "ricotta",
    "goat cheese", "blue cheese", "swiss cheese", "gruyere",
    "monterey jack cheese", "cottage cheese", "mascarpone", "egg",
    "egg yolk", "egg white",
]

_OILS_SAUCES = [
    "oil", "olive oil", "extra virgin olive oil", "vegetable oil",
    "canola oil", "coconut oil", "sesame oil", "toasted sesame oil",
    "peanut oil", "avocado oil", "vinegar", "white vinegar",
    "apple cider vinegar", "red wine vinegar", "white wine vinegar",
    "balsamic vinegar", "rice vinegar", "soy sauce", "tamari", "fish sauce",
    "oyster sauce", "hoisin sauce", "worcestershire sauce", "hot sauce",
    "sriracha", "chili garlic sauce", "tomato sauce", "tomato paste",
    "marinara sauce", "pesto", "ketchup", "mustard", "dijon mustard",
    "mayonnaise", "gochujang", "miso", "miso paste", "tahini",
    "peanut butter", "almond butter", "salsa", "barbecue sauce",
    "chicken stock", "chicken broth", "beef stock", "beef broth",
    "vegetable stock", "vegetable broth", "stock", "broth", "wine",
    "white wine", "red wine", "beer", "lemon juice", "lime juice",
    "orange juice", "lemon zest", "lime zest", "orange zest",
]

_SPICES = [
    "cinnamon", "ground cinnamon", "nutmeg", "ground nutmeg", "ginger",
    "ground ginger", "fresh ginger", "cumin", "ground cumin", "coriander",
    "ground coriander", "paprika", "smoked paprika", "cayenne",
    "cayenne pepper", "chili powder", "red pepper flakes",
    "crushed red pepper", "turmeric", "curry powder", "garam masala",
    "allspice", "ground cloves", "whole cloves", "cardamom",
    "garlic powder", "onion powder", "italian seasoning", "dried oregano",
    "dried thyme", "dried basil", "dried parsley", "zaatar", "sumac",
    "star anise", "fennel seeds", "cumin seeds", "mustard seeds",
    "sesame seeds", "poppy seeds", "chia seeds", "flax seeds",
    "vanilla bean",
]

_PRODUCE = sorted(FRUITS | VEGETABLES | HERBS) + [
    "garlic", "red bell pepper", "green bell pepper", "yellow onion",
    "white onion", "sweet onion", "baby spinach", "frozen spinach",
    "romaine lettuce", "cherry tomatoes", "grape tomatoes",
    "sun dried tomatoes", "russet potatoes", "yukon gold potatoes",
    "butternut squash", "corn kernels", "frozen peas", "snow peas",
    "bean sprouts", "mushrooms", "cremini mushrooms", "shiitake mushrooms",
    "olives", "kalamata olives", "capers", "pickles", "fresh basil",
    "fresh parsley", "fresh cilantro", "fresh thyme", "fresh rosemary",
    "fresh mint", "fresh dill", "bay leaves", "lemongrass",
]

_NUTS = [
    "almonds", "sliced almonds", "walnuts", "pecans", "pistachios",
    "cashews", "peanuts", "hazelnuts", "pine nuts", "macadamia nuts",
    "pumpkin seeds", "sunflower seeds", "dried cranberries", "raisins",
    "dates", "shredded coconut",
]

_PROTEIN = [
    "chicken", "chicken breast", "chicken breasts", "chicken thighs",
    "chicken wings", "ground chicken", "turkey", "ground turkey", "beef",
    "ground beef", "steak", "flank steak", "pork", "ground pork",
    "pork chops", "pork tenderloin", "bacon", "ham", "sausage",
    "italian sausage", "chorizo", "prosciutto", "pancetta", "lamb",
    "ground lamb", "salmon", "tuna", "cod", "tilapia", "shrimp", "scallops",
    "crab", "anchovies", "mussels", "clams",
]

INGREDIENTS = sorted(set(
    _PANTRY + _DAIRY + _OILS_SAUCES + _SPICES + _PRODUCE + _NUTS + _PROTEIN
))
