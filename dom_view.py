from config import STATUS_COLORS

# ==========================================
# DOM ADAPTER
# ==========================================

STAT_ELEMENT_IDS = (
    ("statHP", "statHPValue"),
    ("statATK", "statATKValue"),
    ("statDEF", "statDEFValue"),
)
BUTTON_IDS = ("btnPrevious", "btnRandom", "btnNext")


class DomView:
    """Applies a presenter.VisualDescription to the page. Missing elements are skipped."""

    def __init__(self, doc):
        self.image = doc.getElementById("pokemonImage")
        self.name = doc.getElementById("pokemonName")
        self.id = doc.getElementById("pokemonId")
        self.types = [doc.getElementById("type1"), doc.getElementById("type2")]
        self.stats = [(doc.getElementById(bar), doc.getElementById(val)) for bar, val in STAT_ELEMENT_IDS]
        self.buttons = {btn_id: doc.getElementById(btn_id) for btn_id in BUTTON_IDS}
        self.status_area = doc.getElementById("statusArea")
        self.status_message = doc.getElementById("statusMessage")

    def apply(self, description):
        if self.image:
            self.image.src = description.image.src
            self.image.alt = description.image.alt
        if self.name: self.name.textContent = description.name_text
        if self.id: self.id.textContent = description.id_text

        for el, badge in zip(self.types, description.badges):
            if not el: continue
            if badge.hidden:
                el.classList.add("hidden")
                continue
            el.textContent = badge.text
            el.className = badge.css_class
            el.classList.remove("hidden")

        for (bar_el, value_el), bar in zip(self.stats, description.stat_bars):
            if bar_el: bar_el.style.width = f"{bar.width_percent}%"
            if value_el: value_el.textContent = bar.value_text

    def show_status(self, message, kind="error"):
        if self.status_area:
            self.status_area.classList.remove("hidden")
        if self.status_message:
            self.status_message.textContent = message
            self.status_message.style.color = STATUS_COLORS.get(kind, STATUS_COLORS["error"])

    def hide_status(self):
        if self.status_area:
            self.status_area.classList.add("hidden")

    def set_controls_enabled(self, enabled):
        for btn in self.buttons.values():
            if btn: btn.disabled = not enabled


