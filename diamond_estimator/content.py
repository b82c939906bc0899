# Copy blocks for the estimator, Learn and About pages.
# Kept apart from the rendering code so wording can change without touching layout.

from dataclasses import dataclass
from typing import Dict, List, Tuple

APP_TAGLINE = "Get an accurate estimate of diamond prices based on advanced statistical analysis"

FORM_INTRO = "Provide the characteristics of your diamond to get an estimated price range."
RESULT_INTRO = "Based on your diamond's characteristics, here's the estimated price range."
RESULT_EMPTY = 'Enter diamond details and click "Calculate Estimate" to see the price prediction.'
CARAT_HELP = "Enter a value between 0.1 and 10"
ESTIMATE_FOOTNOTE = (
    "* This estimate is based on statistical analysis of diamond pricing data. "
    "Actual market prices may vary based on additional factors such as fluorescence, "
    "polish, symmetry, and market conditions."
)

# Tooltips next to form fields
FEATURE_DESCRIPTIONS: Dict[str, str] = {
    "carat": "Carat weight is the measurement of how much a diamond weighs. A metric 'carat' is defined as 200 milligrams.",
    "cut": "Cut quality is how well a diamond's facets interact with light. Excellent cut diamonds reflect more light and appear more brilliant.",
    "color": "Diamond color actually refers to the lack of color. The scale ranges from D (colorless) to Z (light yellow or brown).",
    "clarity": "Clarity measures the absence of inclusions and blemishes. Flawless diamonds (very rare) have no inclusions even under magnification.",
}

# Relative importance, 0-100
FEATURE_IMPORTANCE: Dict[str, int] = {
    "carat": 100,
    "cut": 35,
    "color": 45,
    "clarity": 60,
}

FACTOR_IMPACT_INTRO = "Understand how different characteristics affect a diamond's price."
FACTOR_IMPACT_FOOTNOTE = (
    "* Based on statistical analysis of the relationship between diamond characteristics and price."
)


def ranked_factors() -> List[Tuple[str, int, str]]:
    """(name, importance, description) sorted by importance, largest first."""
    rows = [(name, imp, FEATURE_DESCRIPTIONS.get(name, "")) for name, imp in FEATURE_IMPORTANCE.items()]
    return sorted(rows, key=lambda r: -r[1])


# ----------------- Learn page -----------------
@dataclass(frozen=True)
class LearningCard:
    key: str
    title: str
    icon: str
    description: str
    key_points: Tuple[str, ...]


LEARN_TITLE = "Learn About Diamonds"
LEARN_SUBTITLE = "Understanding the 4Cs and other factors that determine a diamond's value"

LEARNING_CARDS: Tuple[LearningCard, ...] = (
    LearningCard(
        key="carat",
        title="Carat Weight",
        icon="⚖️",
        description=(
            "Carat is the unit of measurement for the physical weight of diamonds. One carat equals "
            "0.200 grams or 1/5 gram and is subdivided into 100 points. Carat weight is the most "
            "objective of the 4Cs – it's measured using a highly calibrated digital scale that "
            "captures weight precisely to the hundred thousandths of a carat."
        ),
        key_points=(
            "Carat weight is the most significant factor in determining a diamond's price",
            "Larger diamonds are rarer than smaller diamonds, so they command much higher prices per carat",
            "Two diamonds of equal carat weight can have very different values depending on the other three Cs",
            "Common misconception: Carat refers to a diamond's size, when it actually refers to its weight",
        ),
    ),
    LearningCard(
        key="cut",
        title="Cut Quality",
        icon="💎",
        description=(
            "Cut quality is how well a diamond's facets interact with light. A precisely cut diamond "
            "will appear very brilliant and fiery because it optimally interacts with light. Cut "
            "quality is the most important factor in determining a diamond's overall beauty and sparkle."
        ),
        key_points=(
            "Cut quality is graded on a scale from Excellent to Poor",
            "The cut affects brightness (reflection of white light), fire (dispersion of light into "
            "colors), and scintillation (sparkle and pattern of light and dark areas)",
            "A well-cut diamond can appear larger than its actual carat weight",
            "Even if a diamond has perfect color and clarity, a poor cut can make it appear dull",
        ),
    ),
    LearningCard(
        key="color",
        title="Color Grade",
        icon="🎨",
        description=(
            "Diamond color actually refers to the absence of color. The color evaluation of normal "
            "diamonds is based on the absence of color. The GIA color scale begins with D (colorless) "
            "and continues to Z (light yellow or brown)."
        ),
        key_points=(
            "D-F: Colorless (highest quality and most valuable)",
            "G-J: Near Colorless (excellent value with minimal visible color)",
            "K-M: Faint Color (slight visible color, more affordable)",
            "N-Z: Very Light to Light Color (noticeable color, most affordable)",
            "Color becomes more noticeable as diamond size increases",
        ),
    ),
    LearningCard(
        key="clarity",
        title="Clarity Grade",
        icon="🔍",
        description=(
            "Clarity refers to the absence of inclusions and blemishes. Diamonds formed deep within "
            "the earth under extreme heat and pressure, so most have tiny imperfections. The GIA "
            "Clarity Scale includes 11 grades, from Flawless to Included (I3)."
        ),
        key_points=(
            "FL (Flawless): No inclusions or blemishes visible under 10x magnification",
            "IF (Internally Flawless): No inclusions visible under 10x magnification",
            "VVS1-VVS2 (Very, Very Slightly Included): Inclusions difficult for skilled grader to see under 10x",
            "VS1-VS2 (Very Slightly Included): Inclusions minor and range from difficult to somewhat easy to see",
            "SI1-SI2 (Slightly Included): Inclusions noticeable under 10x magnification",
            "I1-I3 (Included): Inclusions obvious under 10x and may affect transparency and brilliance",
        ),
    ),
)

FAQS: Tuple[Tuple[str, str], ...] = (
    (
        "How is a diamond's price determined?",
        "A diamond's price is determined by the 4Cs (carat, cut, color, and clarity), with carat weight "
        "having the most significant impact. However, other factors such as polish, symmetry, "
        "fluorescence, and market conditions also affect pricing. Our estimator tool uses regression "
        "models based on actual market data to provide accurate price estimations.",
    ),
    (
        "Which diamond characteristic offers the best value?",
        "For the best value, many experts recommend prioritizing cut quality over other characteristics. "
        "A well-cut diamond will appear more brilliant and can even appear larger than its actual carat "
        "weight. Consider diamonds in the G-J color range and VS1-SI1 clarity range for an excellent "
        "balance of quality and value.",
    ),
    (
        "Why do diamonds with the same carat weight vary in price?",
        "Diamonds of equal carat weight can vary dramatically in price due to differences in the other "
        "3Cs: cut, color, and clarity. Additionally, factors such as fluorescence, polish, symmetry, and "
        "proportions impact pricing. Two 1-carat diamonds could differ in price by thousands of dollars "
        "based on these other quality factors.",
    ),
    (
        "How accurate is the price estimate from this tool?",
        "Our price estimator uses statistical models derived from real market data to provide estimates "
        "within approximately 15% of actual retail prices. However, the tool provides a general guide "
        "rather than an exact valuation. Actual prices may vary based on additional factors such as "
        "fluorescence, exact proportions, market conditions, and retailer markup.",
    ),
    (
        "What diamond characteristics should I prioritize for my budget?",
        "For most budgets, prioritize cut quality first as it has the most impact on a diamond's beauty. "
        "If working with a limited budget, you can save by choosing a slightly lower color grade (G-I) "
        "and clarity grade (VS-SI) that still appear beautiful to the naked eye. Carat weight has the "
        "largest price impact, so even slightly reducing size (e.g., from 1.0 to 0.9 carat) can "
        "significantly reduce cost.",
    ),
)

LEARNING_RESOURCES: Dict[str, str] = {
    "GIA Diamond Grading Guide": "https://www.gia.edu/gem-education/diamond-grading",
    "GIA 4Cs of Diamond Quality": "https://4cs.gia.edu/",
    "Natural Diamond Council": "https://www.naturaldiamonds.com/",
}

# Header chips
NAV_LINKS: Dict[str, str] = {
    "GIA 4Cs": "https://4cs.gia.edu/",
    "GIA Cut Grading": "https://4cs.gia.edu/en-us/diamond-cut/",
    "Natural Diamond Council": "https://www.naturaldiamonds.com/",
}


# ----------------- About page -----------------
ABOUT_TITLE = "About This Project"
ABOUT_SUBTITLE = (
    "The Diamond Price Estimator is built on comprehensive statistical analysis of diamond "
    "characteristics and pricing"
)

ABOUT_SECTIONS: Tuple[Tuple[str, str, str], ...] = (
    (
        "📈",
        "Statistical Analysis",
        "This tool is powered by regression models developed through rigorous statistical analysis "
        "of a comprehensive diamond dataset. The models identify the relationships between diamond "
        "characteristics and market prices, allowing for accurate price predictions for diamonds "
        "of varying qualities.",
    ),
    (
        "🎓",
        "Academic Foundation",
        "The project originated as an academic statistical analysis of diamond pricing factors, "
        "applying concepts from probability theory, regression analysis, and data visualization. "
        "The techniques used include multiple linear regression, variable importance analysis, "
        "and confidence interval estimation.",
    ),
    (
        "🧰",
        "Technology Stack",
        "The web application is built with Streamlit, pandas and NumPy, with ReportLab for the "
        "downloadable estimate report. The statistical analysis was performed using the R "
        "programming language with packages like tidyverse, ggplot2, and various modeling libraries.",
    ),
)

DATASET_INTRO = (
    "The statistical models powering this estimator were trained on a comprehensive dataset "
    "containing information on approximately 50,000 diamonds with various combinations of "
    "characteristics. The dataset includes detailed information on:"
)
DATASET_FEATURES: Tuple[str, ...] = (
    "Carat weights", "Cut qualities", "Color grades", "Clarity grades",
    "Depth percentages", "Table percentages", "Physical dimensions", "Market prices",
)
DATASET_OUTRO = (
    "Through extensive analysis of this dataset, we identified the key factors that influence "
    "diamond prices and quantified their impact. Our multiple regression models achieve high "
    "accuracy with an R-squared value exceeding 0.95, indicating that our model explains more "
    "than 95% of the variation in diamond prices."
)

METHODOLOGY: Tuple[Tuple[str, str], ...] = (
    ("Data Preparation",
     "The dataset was cleaned, validated, and prepared for analysis. Exploratory data analysis was "
     "performed to understand the distributions and relationships between variables."),
    ("Feature Engineering",
     "We created relevant features and transformations to improve model performance. This included "
     "handling categorical variables and exploring interactions between diamond characteristics."),
    ("Model Development",
     "Multiple regression models were developed and evaluated. The final model was selected based "
     "on predictive accuracy, interpretability, and robustness."),
    ("Validation",
     "The model was validated using cross-validation techniques to ensure it performs well on new, "
     "unseen data and isn't overfit to the training dataset."),
    ("Uncertainty Quantification",
     "Confidence intervals were developed to provide a range of estimated prices rather than a single "
     "point estimate, acknowledging the inherent uncertainty in price prediction."),
)

EDUCATIONAL_NOTICE = "This tool is provided for educational and informational purposes only."
DISCLAIMER = (
    "Disclaimer: Price estimations are based on statistical models and serve as general guidance "
    "only. Actual market prices may vary."
)
