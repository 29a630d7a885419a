"""
Constants and shared data for cycle and suitability services.
"""
from typing import Dict, List
from src.models.phase import CyclePhase
from src.models.profile import PcosType
from src.models.food import FoodCategory, SuitabilityRating

DEFAULT_CYCLE_LENGTH = 28

# Menstrual phase length when no plausible period end date is recorded
DEFAULT_MENSTRUAL_DURATION = 5
MIN_MENSTRUAL_DURATION = 2
MAX_MENSTRUAL_DURATION = 10

# 0-based cycle offsets, fixed regardless of cycle length
OVULATORY_START_DAY = 14
LUTEAL_START_DAY = 17

PHASE_ORDER: List[CyclePhase] = [
    CyclePhase.MENSTRUAL,
    CyclePhase.FOLLICULAR,
    CyclePhase.OVULATORY,
    CyclePhase.LUTEAL
]

PHASE_TRANSITIONS = {
    CyclePhase.MENSTRUAL: CyclePhase.FOLLICULAR,
    CyclePhase.FOLLICULAR: CyclePhase.OVULATORY,
    CyclePhase.OVULATORY: CyclePhase.LUTEAL,
    CyclePhase.LUTEAL: CyclePhase.MENSTRUAL
}

# Sort key for ranking, lower first
SUITABILITY_ORDER: Dict[SuitabilityRating, int] = {
    SuitabilityRating.RECOMMENDED: 0,
    SuitabilityRating.NEUTRAL: 1,
    SuitabilityRating.AVOID: 2
}

PHASE_GUIDANCE = {
    CyclePhase.MENSTRUAL: "Focus on rest and gentle nourishment. Your body needs iron-rich foods and warmth.",
    CyclePhase.FOLLICULAR: "Your energy is naturally rising. Great time for creative projects and new activities.",
    CyclePhase.OVULATORY: "Peak energy and confidence. Ideal for social activities and high-intensity workouts.",
    CyclePhase.LUTEAL: "Time to slow down. Focus on complex carbs and stress-reducing activities."
}

# Used when the AI recommendation is unavailable
PHASE_DAILY_DEFAULTS = {
    CyclePhase.MENSTRUAL: {
        "nutrition_focus": "Iron-rich, warming meals that are gentle on digestion",
        "exercise_focus": "Restorative movement",
        "exercise_types": ["Walking", "Gentle yoga", "Stretching"],
        "intensity": "low",
        "lifestyle": "Prioritise sleep and keep a heat pack handy for cramps."
    },
    CyclePhase.FOLLICULAR: {
        "nutrition_focus": "Light, fresh foods with fermented sides and sprouted grains",
        "exercise_focus": "Build strength as energy rises",
        "exercise_types": ["Strength training", "Cardio", "Dance"],
        "intensity": "medium",
        "lifestyle": "Plan new projects while motivation is high."
    },
    CyclePhase.OVULATORY: {
        "nutrition_focus": "Raw vegetables, fibre and anti-inflammatory foods",
        "exercise_focus": "Peak performance",
        "exercise_types": ["HIIT", "Running", "Group classes"],
        "intensity": "high",
        "lifestyle": "Schedule social plans and important conversations."
    },
    CyclePhase.LUTEAL: {
        "nutrition_focus": "Complex carbs and magnesium-rich foods to steady mood",
        "exercise_focus": "Moderate, stress-reducing movement",
        "exercise_types": ["Pilates", "Swimming", "Yoga"],
        "intensity": "medium",
        "lifestyle": "Wind down earlier and limit caffeine in the evening."
    }
}

PCOS_TYPE_GUIDELINES = {
    PcosType.INSULIN_RESISTANT: "Low-glycemic foods, lean proteins, healthy fats. Avoid refined carbs and sugar.",
    PcosType.INFLAMMATORY: "Anti-inflammatory foods (turmeric, omega-3s, leafy greens). Avoid dairy, gluten, processed foods.",
    PcosType.ADRENAL: "Stress-reducing foods, balanced meals, adequate carbs. Avoid caffeine.",
    PcosType.POST_PILL: "Liver-supporting foods, zinc, B vitamins. Avoid excess estrogen-mimicking foods.",
    PcosType.UNKNOWN: "Balanced whole-food meals with steady protein and fibre."
}

PHASE_MEAL_GUIDELINES = {
    CyclePhase.MENSTRUAL: "Iron-rich foods, warming meals, gentle on digestion",
    CyclePhase.FOLLICULAR: "Light, fresh foods, sprouted grains, fermented foods",
    CyclePhase.OVULATORY: "Raw vegetables, anti-inflammatory foods, fiber",
    CyclePhase.LUTEAL: "Complex carbs, magnesium-rich foods, serotonin boosters"
}

DAY_NAMES = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]

DEFAULT_HYDRATION = "8 glasses of water, warm ginger-lemon water, herbal teas"
DEFAULT_SUPPLEMENTS = ["Magnesium", "Vitamin D", "Omega-3", "Iron (during menstrual phase)"]

DEFAULT_PHASE_MEALS = {
    CyclePhase.MENSTRUAL: {
        "breakfast": {"name": "Warm Oatmeal Bowl", "ingredients": ["oats", "banana", "cinnamon", "walnuts", "iron-fortified milk"], "benefits": "Iron-rich to replenish during menstruation", "prep_time": "10 min"},
        "lunch": {"name": "Lentil & Spinach Soup", "ingredients": ["red lentils", "spinach", "turmeric", "garlic", "bone broth"], "benefits": "Anti-inflammatory, iron and protein rich", "prep_time": "30 min"},
        "dinner": {"name": "Salmon with Sweet Potato", "ingredients": ["wild salmon", "sweet potato", "steamed broccoli", "olive oil"], "benefits": "Omega-3s reduce cramps, complex carbs for energy", "prep_time": "25 min"},
        "snacks": ["Dark chocolate (70%+)", "Trail mix with pumpkin seeds"]
    },
    CyclePhase.FOLLICULAR: {
        "breakfast": {"name": "Green Smoothie Bowl", "ingredients": ["kale", "banana", "flax seeds", "almond milk", "avocado"], "benefits": "Estrogen-supporting nutrients for follicle development", "prep_time": "5 min"},
        "lunch": {"name": "Quinoa Buddha Bowl", "ingredients": ["quinoa", "chickpeas", "roasted vegetables", "tahini dressing"], "benefits": "Balanced macros for rising energy levels", "prep_time": "20 min"},
        "dinner": {"name": "Chicken Stir-Fry", "ingredients": ["chicken breast", "broccoli", "bell peppers", "brown rice", "coconut aminos"], "benefits": "Lean protein supports hormone production", "prep_time": "20 min"},
        "snacks": ["Apple with almond butter", "Fermented foods (kimchi)"]
    },
    CyclePhase.OVULATORY: {
        "breakfast": {"name": "Berry Protein Parfait", "ingredients": ["greek yogurt", "mixed berries", "granola", "chia seeds"], "benefits": "Antioxidants and protein for peak fertility", "prep_time": "5 min"},
        "lunch": {"name": "Mediterranean Salad", "ingredients": ["mixed greens", "grilled chicken", "olives", "cucumber", "feta"], "benefits": "Anti-inflammatory fats support ovulation", "prep_time": "15 min"},
        "dinner": {"name": "Baked Cod with Vegetables", "ingredients": ["cod fillet", "asparagus", "cherry tomatoes", "lemon", "herbs"], "benefits": "Light, nutrient-dense for hormonal peak", "prep_time": "25 min"},
        "snacks": ["Raw veggie sticks with hummus", "Brazil nuts"]
    },
    CyclePhase.LUTEAL: {
        "breakfast": {"name": "Pumpkin Seed Pancakes", "ingredients": ["oat flour", "pumpkin seeds", "banana", "eggs", "cinnamon"], "benefits": "Magnesium-rich to reduce PMS symptoms", "prep_time": "15 min"},
        "lunch": {"name": "Turkey & Avocado Wrap", "ingredients": ["whole wheat wrap", "turkey", "avocado", "spinach", "tomato"], "benefits": "Tryptophan and B6 for serotonin production", "prep_time": "10 min"},
        "dinner": {"name": "Beef & Root Vegetable Stew", "ingredients": ["grass-fed beef", "carrots", "parsnips", "potatoes", "rosemary"], "benefits": "Complex carbs and iron for luteal support", "prep_time": "45 min"},
        "snacks": ["Dark chocolate squares", "Banana with cashew butter"]
    }
}

KNOWN_SYMPTOMS = [
    "Cramps", "Headache", "Bloating", "Acne", "Cravings", "Back Pain",
    "Fatigue", "Nausea", "Breast Tenderness", "Mood Swings", "Insomnia",
    "Hot Flashes", "Dizziness", "Joint Pain", "Hair Loss", "Weight Gain"
]

KNOWN_MOODS = ["Happy", "Anxious", "Irritable", "Energetic", "Tired", "Calm"]

R = SuitabilityRating.RECOMMENDED
A = SuitabilityRating.AVOID

# Per-category PCOS estimates for items that are not in the catalog
CATEGORY_PCOS_ESTIMATES: Dict[FoodCategory, Dict[PcosType, SuitabilityRating]] = {
    FoodCategory.VEGETABLE: {t: R for t in PcosType if t != PcosType.UNKNOWN},
    FoodCategory.PROTEIN: {PcosType.INSULIN_RESISTANT: R, PcosType.ADRENAL: R},
    FoodCategory.FAT: {PcosType.INSULIN_RESISTANT: R, PcosType.INFLAMMATORY: R},
    FoodCategory.FRUIT: {PcosType.INFLAMMATORY: R},
    FoodCategory.GRAIN: {PcosType.INSULIN_RESISTANT: A},
    FoodCategory.SPICE: {PcosType.INFLAMMATORY: R},
    FoodCategory.DAIRY: {PcosType.INFLAMMATORY: A},
    FoodCategory.BEVERAGE: {PcosType.ADRENAL: A},
    FoodCategory.OTHER: {}
}

SEED_GROCERY_ITEMS: List[dict] = [
    {"name": "Wild Salmon", "category": "protein", "benefits": "Omega-3 fats calm inflammation and ease cramps",
     "pcos_suitability": {"insulin_resistant": "recommended", "inflammatory": "recommended", "adrenal": "recommended", "post_pill": "recommended"},
     "cycle_phase_suitability": {"menstrual": "recommended", "ovulatory": "recommended"},
     "dietary_tags": ["gluten_free", "dairy_free"]},
    {"name": "Spinach", "category": "vegetable", "benefits": "Iron and folate to replenish blood loss",
     "pcos_suitability": {"insulin_resistant": "recommended", "inflammatory": "recommended", "adrenal": "recommended", "post_pill": "recommended"},
     "cycle_phase_suitability": {"menstrual": "recommended", "follicular": "recommended"},
     "dietary_tags": ["vegan", "vegetarian", "gluten_free", "dairy_free"]},
    {"name": "Berries", "category": "fruit", "benefits": "Antioxidant-rich, low glycemic index",
     "pcos_suitability": {"insulin_resistant": "recommended", "inflammatory": "recommended"},
     "cycle_phase_suitability": {"follicular": "recommended", "ovulatory": "recommended"},
     "dietary_tags": ["vegan", "vegetarian", "gluten_free", "dairy_free"]},
    {"name": "Quinoa", "category": "grain", "benefits": "Complete protein with slow-release carbs",
     "pcos_suitability": {"inflammatory": "recommended", "adrenal": "recommended"},
     "cycle_phase_suitability": {"follicular": "recommended", "luteal": "recommended"},
     "dietary_tags": ["vegan", "vegetarian", "gluten_free", "dairy_free"]},
    {"name": "Avocado", "category": "fat", "benefits": "Healthy fats steady blood sugar",
     "pcos_suitability": {"insulin_resistant": "recommended", "inflammatory": "recommended", "adrenal": "recommended", "post_pill": "recommended"},
     "cycle_phase_suitability": {"follicular": "recommended", "luteal": "recommended"},
     "dietary_tags": ["vegan", "vegetarian", "gluten_free", "dairy_free"]},
    {"name": "Turmeric", "category": "spice", "benefits": "Curcumin is strongly anti-inflammatory",
     "pcos_suitability": {"inflammatory": "recommended"},
     "cycle_phase_suitability": {"menstrual": "recommended"},
     "dietary_tags": ["vegan", "vegetarian", "gluten_free", "dairy_free"]},
    {"name": "Green Tea", "category": "beverage", "benefits": "Polyphenols support insulin sensitivity",
     "pcos_suitability": {"insulin_resistant": "recommended", "adrenal": "avoid"},
     "cycle_phase_suitability": {"ovulatory": "recommended"},
     "dietary_tags": ["vegan", "vegetarian", "gluten_free", "dairy_free"]},
    {"name": "Coffee", "category": "beverage", "benefits": None,
     "pcos_suitability": {"adrenal": "avoid"},
     "cycle_phase_suitability": {"luteal": "avoid"},
     "dietary_tags": ["vegan", "vegetarian", "gluten_free", "dairy_free"]},
    {"name": "White Bread", "category": "grain", "benefits": None,
     "pcos_suitability": {"insulin_resistant": "avoid", "inflammatory": "avoid"},
     "dietary_tags": ["vegetarian"]},
    {"name": "Sweet Potato", "category": "vegetable", "benefits": "Complex carbs, great for luteal phase energy",
     "pcos_suitability": {"adrenal": "recommended", "post_pill": "recommended"},
     "cycle_phase_suitability": {"menstrual": "recommended", "luteal": "recommended"},
     "dietary_tags": ["vegan", "vegetarian", "gluten_free", "dairy_free"]},
    {"name": "Greek Yogurt", "category": "dairy", "benefits": "Protein and probiotics for gut health",
     "pcos_suitability": {"insulin_resistant": "recommended", "inflammatory": "avoid"},
     "cycle_phase_suitability": {"follicular": "recommended", "ovulatory": "recommended"},
     "dietary_tags": ["vegetarian", "gluten_free"]},
    {"name": "Cheddar Cheese", "category": "dairy", "benefits": None,
     "pcos_suitability": {"inflammatory": "avoid"},
     "dietary_tags": ["vegetarian", "gluten_free"]},
    {"name": "Eggs", "category": "protein", "benefits": "Choline and protein for hormone production",
     "pcos_suitability": {"insulin_resistant": "recommended", "adrenal": "recommended", "post_pill": "recommended"},
     "cycle_phase_suitability": {"follicular": "recommended"},
     "dietary_tags": ["vegetarian", "gluten_free", "dairy_free"]},
    {"name": "Lentils", "category": "protein", "benefits": "Plant iron and fibre",
     "pcos_suitability": {"insulin_resistant": "recommended", "inflammatory": "recommended"},
     "cycle_phase_suitability": {"menstrual": "recommended", "luteal": "recommended"},
     "dietary_tags": ["vegan", "vegetarian", "gluten_free", "dairy_free"]},
    {"name": "Pumpkin Seeds", "category": "fat", "benefits": "Zinc and magnesium ease PMS",
     "pcos_suitability": {"post_pill": "recommended", "insulin_resistant": "recommended"},
     "cycle_phase_suitability": {"follicular": "recommended", "luteal": "recommended"},
     "dietary_tags": ["vegan", "vegetarian", "gluten_free", "dairy_free"]},
    {"name": "Dark Chocolate", "category": "other", "benefits": "Magnesium for mood and cramps",
     "pcos_suitability": {"adrenal": "recommended"},
     "cycle_phase_suitability": {"luteal": "recommended", "menstrual": "recommended"},
     "dietary_tags": ["vegetarian", "gluten_free"]},
    {"name": "Broccoli", "category": "vegetable", "benefits": "Supports liver estrogen clearance",
     "pcos_suitability": {"post_pill": "recommended", "inflammatory": "recommended", "insulin_resistant": "recommended"},
     "cycle_phase_suitability": {"ovulatory": "recommended", "follicular": "recommended"},
     "dietary_tags": ["vegan", "vegetarian", "gluten_free", "dairy_free"]},
    {"name": "Sugary Soda", "category": "beverage", "benefits": None,
     "pcos_suitability": {"insulin_resistant": "avoid", "inflammatory": "avoid", "adrenal": "avoid", "post_pill": "avoid", "unknown": "avoid"},
     "dietary_tags": ["vegan", "vegetarian", "gluten_free", "dairy_free"]},
    {"name": "Oats", "category": "grain", "benefits": "Soluble fibre and steady energy",
     "pcos_suitability": {"adrenal": "recommended"},
     "cycle_phase_suitability": {"menstrual": "recommended", "luteal": "recommended"},
     "dietary_tags": ["vegan", "vegetarian", "dairy_free"]},
    {"name": "Chicken Breast", "category": "protein", "benefits": "Lean protein supports hormone production",
     "pcos_suitability": {"insulin_resistant": "recommended", "adrenal": "recommended"},
     "cycle_phase_suitability": {"follicular": "recommended"},
     "dietary_tags": ["gluten_free", "dairy_free"]},
    {"name": "Flax Seeds", "category": "fat", "benefits": "Lignans help balance estrogen",
     "pcos_suitability": {"post_pill": "recommended", "inflammatory": "recommended"},
     "cycle_phase_suitability": {"follicular": "recommended", "menstrual": "recommended"},
     "dietary_tags": ["vegan", "vegetarian", "gluten_free", "dairy_free"]},
    {"name": "Brown Rice", "category": "grain", "benefits": "Complex carbs and B vitamins",
     "pcos_suitability": {"adrenal": "recommended"},
     "cycle_phase_suitability": {"luteal": "recommended"},
     "dietary_tags": ["vegan", "vegetarian", "gluten_free", "dairy_free"]},
    {"name": "Kimchi", "category": "other", "benefits": "Probiotics for estrogen metabolism",
     "pcos_suitability": {"post_pill": "recommended"},
     "cycle_phase_suitability": {"follicular": "recommended"},
     "dietary_tags": ["vegan", "vegetarian", "gluten_free", "dairy_free"]},
    {"name": "Soy Milk", "category": "beverage", "benefits": None,
     "pcos_suitability": {"post_pill": "avoid"},
     "dietary_tags": ["vegan", "vegetarian", "gluten_free", "dairy_free"]},
    {"name": "Ginger", "category": "spice", "benefits": "Eases cramps and nausea",
     "pcos_suitability": {"inflammatory": "recommended"},
     "cycle_phase_suitability": {"menstrual": "recommended", "luteal": "recommended"},
     "dietary_tags": ["vegan", "vegetarian", "gluten_free", "dairy_free"]},
    {"name": "Banana", "category": "fruit", "benefits": "Vitamin B6 for serotonin",
     "pcos_suitability": {"adrenal": "recommended"},
     "cycle_phase_suitability": {"luteal": "recommended"},
     "dietary_tags": ["vegan", "vegetarian", "gluten_free", "dairy_free"]},
    {"name": "Olive Oil", "category": "fat", "benefits": "Monounsaturated fats reduce inflammation",
     "pcos_suitability": {"insulin_resistant": "recommended", "inflammatory": "recommended", "adrenal": "recommended", "post_pill": "recommended"},
     "cycle_phase_suitability": {"ovulatory": "recommended"},
     "dietary_tags": ["vegan", "vegetarian", "gluten_free", "dairy_free"]},
    {"name": "Red Meat", "category": "protein", "benefits": "Heme iron during heavy flow",
     "pcos_suitability": {"inflammatory": "avoid"},
     "cycle_phase_suitability": {"menstrual": "recommended"},
     "dietary_tags": ["gluten_free", "dairy_free"]},
    {"name": "Potato Chips", "category": "other", "benefits": None,
     "pcos_suitability": {"insulin_resistant": "avoid", "inflammatory": "avoid"},
     "dietary_tags": ["vegan", "vegetarian", "gluten_free"]},
    {"name": "Chamomile Tea", "category": "beverage", "benefits": "Calms the nervous system before sleep",
     "pcos_suitability": {"adrenal": "recommended"},
     "cycle_phase_suitability": {"luteal": "recommended", "menstrual": "recommended"},
     "dietary_tags": ["vegan", "vegetarian", "gluten_free", "dairy_free"]}
]
