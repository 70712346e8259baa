# storefront/ui/app.py
# Run with: streamlit run storefront/ui/app.py
import streamlit as st

from storefront.config import settings
from storefront.ui.client import RecommendationClient
from storefront.ui.controller import CatalogController
from storefront.ui.state import local_image_path

st.set_page_config(page_title="Storefront", page_icon="🛍️", layout="wide")
st.title("🛍️ Products")
st.caption("Browse by category, or describe what you need and let the AI pick for you.")

# ---- One controller per browser session
if "controller" not in st.session_state:
    st.session_state.controller = CatalogController(RecommendationClient())

controller: CatalogController = st.session_state.controller
state = controller.state

# ---- Preference box
with st.form(key="preference_form"):
    preference = st.text_input(
        "Describe what you're looking for",
        value=state.preference,
        placeholder="e.g., I want a phone under $500 for gaming",
    )
    ask_col, clear_col = st.columns([1, 1])
    asked = ask_col.form_submit_button("Ask AI", disabled=state.loading)
    cleared = clear_col.form_submit_button("Clear")

if cleared:
    controller.clear()
elif asked:
    controller.set_preference(preference)
    with st.spinner("Finding products for you..."):
        controller.submit()

if state.alert:
    st.error(state.alert)
    controller.acknowledge()

# ---- Category tabs (hidden while showing recommendations)
if state.showing_recommendations:
    st.subheader("AI recommendations")
    st.success(state.recommendation_summary())
else:
    categories = controller.categories
    selected = st.radio(
        "Category",
        categories,
        index=categories.index(state.selected_category) if state.selected_category in categories else 0,
        horizontal=True,
    )
    controller.select_category(selected)

# ---- Product cards
products = controller.displayed_products()
if not products:
    st.info("No products matched. Try different wording or clear the search.")

for row_start in range(0, len(products), 3):
    columns = st.columns(3)
    for column, product in zip(columns, products[row_start:row_start + 3]):
        with column:
            image_path = local_image_path(product, settings.STOREFRONT_IMAGE_DIR)
            if image_path:
                st.image(image_path, caption=product.name)
            st.markdown(f"**{product.name}**")
            st.caption(product.category)
            st.write(product.description)
            st.markdown(f"**${product.price:,.2f}**")
