"""
Translation table for UI strings and generation prompts.

Static data only: one Translations entry per supported language.
"""

from dataclasses import dataclass
from typing import Dict

from recipe_ai.models import LANGUAGE_AR, LANGUAGE_EN, LANGUAGE_FR

# Labels for the language selector, in display order
LANGUAGE_LABELS: Dict[str, str] = {
    LANGUAGE_EN: "English",
    LANGUAGE_FR: "Français",
    LANGUAGE_AR: "العربية",
}


@dataclass(frozen=True)
class Translations:
    """Localized UI strings and prompt templates for one language."""
    app_title: str
    search_placeholder: str
    search_button: str
    all_recipes: str
    favorites: str
    error_title: str
    no_recipes: str
    no_favorites: str
    loading: str
    back_button: str
    ingredients: str
    instructions: str
    servings: str
    cooking_time: str
    nutrition: str
    calories: str
    protein: str
    carbs: str
    fat: str
    standard_cook: str
    thermomix_cook: str
    view_recipe: str
    share: str
    share_recipe: str
    copied_to_clipboard: str
    add_to_favorites: str
    remove_from_favorites: str
    regenerate_image: str
    regenerating: str
    image_error: str
    powered_by: str
    contact_us: str
    initial_prompt: str
    search_prompt_template: str

    def search_prompt(self, term: str) -> str:
        """Prompt asking for recipes matching a user search term."""
        return self.search_prompt_template.format(term=term)


TRANSLATIONS: Dict[str, Translations] = {
    LANGUAGE_EN: Translations(
        app_title="Recipe AI",
        search_placeholder="Search for a dish, an ingredient, a cuisine...",
        search_button="Search",
        all_recipes="All recipes",
        favorites="Favorites",
        error_title="Oops! Something went wrong.",
        no_recipes="No recipes found. Try searching for something else!",
        no_favorites="You have no favorite recipes yet. Tap the heart on a recipe to save it.",
        loading="Cooking up recipes…",
        back_button="Back",
        ingredients="Ingredients",
        instructions="Instructions",
        servings="Servings",
        cooking_time="Cooking time",
        nutrition="Nutrition (per serving)",
        calories="Calories",
        protein="Protein",
        carbs="Carbs",
        fat="Fat",
        standard_cook="Standard",
        thermomix_cook="Thermomix",
        view_recipe="View recipe",
        share="Share",
        share_recipe="Share this recipe",
        copied_to_clipboard="Copied to clipboard!",
        add_to_favorites="Add to favorites",
        remove_from_favorites="Remove from favorites",
        regenerate_image="Generate image",
        regenerating="Generating…",
        image_error="Could not generate an image for this recipe.",
        powered_by="Powered by Google Gemini",
        contact_us="Contact us",
        initial_prompt=(
            "Generate 8 diverse and popular recipes from around the world, "
            "suitable for a home cook."
        ),
        search_prompt_template="Generate 8 recipes related to: \"{term}\".",
    ),
    LANGUAGE_FR: Translations(
        app_title="Recipe AI",
        search_placeholder="Cherchez un plat, un ingrédient, une cuisine...",
        search_button="Rechercher",
        all_recipes="Toutes les recettes",
        favorites="Favoris",
        error_title="Oups ! Une erreur est survenue.",
        no_recipes="Aucune recette trouvée. Essayez une autre recherche !",
        no_favorites="Vous n'avez pas encore de recettes favorites. Touchez le cœur d'une recette pour l'enregistrer.",
        loading="Préparation des recettes…",
        back_button="Retour",
        ingredients="Ingrédients",
        instructions="Instructions",
        servings="Portions",
        cooking_time="Temps de cuisson",
        nutrition="Valeurs nutritionnelles (par portion)",
        calories="Calories",
        protein="Protéines",
        carbs="Glucides",
        fat="Lipides",
        standard_cook="Standard",
        thermomix_cook="Thermomix",
        view_recipe="Voir la recette",
        share="Partager",
        share_recipe="Partager cette recette",
        copied_to_clipboard="Copié dans le presse-papiers !",
        add_to_favorites="Ajouter aux favoris",
        remove_from_favorites="Retirer des favoris",
        regenerate_image="Générer une image",
        regenerating="Génération…",
        image_error="Impossible de générer une image pour cette recette.",
        powered_by="Propulsé par Google Gemini",
        contact_us="Nous contacter",
        initial_prompt=(
            "Génère 8 recettes variées et populaires du monde entier, "
            "adaptées à un cuisinier amateur."
        ),
        search_prompt_template="Génère 8 recettes liées à : « {term} ».",
    ),
    LANGUAGE_AR: Translations(
        app_title="Recipe AI",
        search_placeholder="ابحث عن طبق أو مكوّن أو مطبخ...",
        search_button="بحث",
        all_recipes="كل الوصفات",
        favorites="المفضلة",
        error_title="عذرًا! حدث خطأ ما.",
        no_recipes="لم يتم العثور على وصفات. جرّب البحث عن شيء آخر!",
        no_favorites="لا توجد وصفات مفضلة بعد. اضغط على القلب في أي وصفة لحفظها.",
        loading="جارٍ تحضير الوصفات…",
        back_button="رجوع",
        ingredients="المكونات",
        instructions="طريقة التحضير",
        servings="عدد الحصص",
        cooking_time="وقت الطهي",
        nutrition="القيم الغذائية (لكل حصة)",
        calories="السعرات الحرارية",
        protein="البروتين",
        carbs="الكربوهيدرات",
        fat="الدهون",
        standard_cook="عادي",
        thermomix_cook="ترمومكس",
        view_recipe="عرض الوصفة",
        share="مشاركة",
        share_recipe="شارك هذه الوصفة",
        copied_to_clipboard="تم النسخ إلى الحافظة!",
        add_to_favorites="أضف إلى المفضلة",
        remove_from_favorites="أزل من المفضلة",
        regenerate_image="إنشاء صورة",
        regenerating="جارٍ الإنشاء…",
        image_error="تعذّر إنشاء صورة لهذه الوصفة.",
        powered_by="مدعوم من Google Gemini",
        contact_us="اتصل بنا",
        initial_prompt="أنشئ 8 وصفات متنوعة وشائعة من حول العالم تناسب الطهي المنزلي.",
        search_prompt_template="أنشئ 8 وصفات متعلقة بـ: \"{term}\".",
    ),
}


def get_translations(language: str) -> Translations:
    """Return the translations for a language, falling back to English."""
    return TRANSLATIONS.get(language, TRANSLATIONS[LANGUAGE_EN])
