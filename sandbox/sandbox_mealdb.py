"""
Sandbox script for exercising the recipe service and controllers against the live API.

This script runs the same flow as the Streamlit app without a UI:
- Loads the dessert list through a ListController
- Loads the detail of the first dessert through a DetailController
- Looks up an id that does not exist to show the NotFound path

Prerequisites:
- Network access to themealdb.com (or MEALDB_BASE_URL pointing elsewhere)

Run:
    python -m sandbox.sandbox_mealdb
"""

from pprint import pprint

from mealdb.config import configure_logging
from mealdb.service import RecipeService
from mealdb.state import DetailController, Failure, ListController, Success


def run():
    """Fetch the dessert list and one recipe detail, printing the results."""
    configure_logging()
    service = RecipeService()
    list_controller = ListController(service)
    detail_controller = None

    try:
        print("=" * 80)
        print("Testing Dessert List")
        print("=" * 80)
        print(f"\nBase URL: {service.base_url}")

        list_controller.load()
        state = list_controller.wait(timeout=30)

        if isinstance(state, Failure):
            print(f"\n❌ List failed: {state.reason} ({state.error!r})")
            return
        if not isinstance(state, Success):
            print(f"\n⚠️  List still in state {state!r} after 30s")
            return

        recipes = state.value
        print(f"Total desserts: {len(recipes)}\n")
        for i, recipe in enumerate(recipes[:10], 1):
            print(f"{i:2d}. [{recipe.id:>6s}] {recipe.name}")
        if len(recipes) > 10:
            print(f"    ... and {len(recipes) - 10} more")

        if not recipes:
            return

        print("\n" + "=" * 80)
        print(f"Testing Recipe Detail ({recipes[0].name})")
        print("=" * 80)

        detail_controller = DetailController(service, recipes[0].id)
        detail_controller.load()
        state = detail_controller.wait(timeout=30)

        if isinstance(state, Success):
            detail = state.value
            print(f"\n{detail.name}\n")
            print("Ingredients:")
            for ingredient in detail.ingredients:
                print(f"  • {ingredient.label}")
            print("\nInstructions (first 300 chars):")
            print(detail.instructions[:300])
            print("\n=== Full Record ===")
            pprint(detail.model_dump(exclude={"instructions"}))
        else:
            print(f"\n❌ Detail not loaded: {state!r}")

        print("\n=== Unknown Id ===")
        detail_controller.load("0")
        print(detail_controller.wait(timeout=30))

        print("\n" + "=" * 80)

    except Exception as exc:
        print(f"\n❌ Error during sandbox run: {exc}")
        import traceback
        traceback.print_exc()
    finally:
        list_controller.close()
        if detail_controller is not None:
            detail_controller.close()
        service.close()


if __name__ == "__main__":
    run()
