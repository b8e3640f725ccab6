import streamlit as st

from bmr_calculator.app_logging import configure_logging
from bmr_calculator.config import load_settings
from bmr_calculator.form import CalculatorForm
from bmr_calculator.models import ACTIVITY_LEVELS, SEXES, InputFields, MetabolicResult


class ToastNotifier:
    def error(self, message: str) -> None:
        st.toast(message, icon="⚠️")

    def success(self, result: MetabolicResult) -> None:
        st.toast("Calculation complete!", icon="✅")


try:
    settings = load_settings()
except ValueError as exc:
    st.error(f"Configuration error: {exc}")
    st.stop()
configure_logging(settings.log_level)

st.set_page_config(page_title="BMR Calculator", page_icon="🔥", layout="wide")
st.title("🔥 Basal Metabolic Rate Calculator")
st.caption("Find out how many calories your body needs every day to keep its vital functions running.")

if "form" not in st.session_state:
    st.session_state["form"] = CalculatorForm(
        notifier=ToastNotifier(),
        fields=InputFields(sex=settings.default_sex, activity_level=settings.default_activity),
    )
form: CalculatorForm = st.session_state["form"]

left, right = st.columns(2)

with left:
    st.header("Your details")
    weight = st.text_input("⚖️ Weight (kg)", key="weight_kg", placeholder="e.g. 70")
    height = st.text_input("📏 Height (cm)", key="height_cm", placeholder="e.g. 175")
    age = st.text_input("📅 Age (years)", key="age_years", placeholder="e.g. 30")
    sex = st.radio(
        "Sex",
        list(SEXES),
        index=SEXES.index(settings.default_sex),
        format_func=str.capitalize,
        horizontal=True,
    )
    activity_keys = list(ACTIVITY_LEVELS)
    activity = st.selectbox(
        "🏃 Physical activity level",
        activity_keys,
        index=activity_keys.index(settings.default_activity),
        format_func=lambda key: ACTIVITY_LEVELS[key].label,
    )
    form.update(weight_kg=weight, height_cm=height, age_years=age, sex=sex, activity_level=activity)

    if st.button("Calculate", type="primary", use_container_width=True):
        form.submit()

with right:
    result = form.result
    if result is None:
        with st.container(border=True):
            st.subheader("Fill in the form")
            st.write(
                "Complete your details on the left to calculate your basal metabolic rate "
                "and daily energy expenditure."
            )
    else:
        st.metric("Basal Metabolic Rate", f"{result.bmr} kcal")
        st.caption("Calories at complete rest")
        st.metric("Total Daily Energy Expenditure", f"{result.tdee} kcal")
        st.caption(result.activity_label)
        with st.container(border=True):
            st.subheader("Recommendations")
            st.markdown(
                f"- **Weight loss:** {result.weight_loss_target} kcal/day (-0.5 kg/week)\n"
                f"- **Maintenance:** {result.maintenance_target} kcal/day\n"
                f"- **Muscle gain:** {result.muscle_gain_target} kcal/day (+0.3 kg/week)"
            )

st.divider()
info = st.columns(3)
info[0].markdown(
    "#### What is BMR?\n"
    "Basal Metabolic Rate is the number of calories your body needs to keep vital functions "
    "such as breathing, circulation and body temperature going at complete rest."
)
info[1].markdown(
    "#### Formula used\n"
    "We use the Mifflin-St Jeor equation, one of the most accurate current estimates of basal "
    "metabolism. It takes weight, height, age and sex into account."
)
info[2].markdown(
    "#### Total daily expenditure\n"
    "TDEE (Total Daily Energy Expenditure) multiplies your BMR by your activity level, showing "
    "how many calories you actually burn per day, exercise included."
)
