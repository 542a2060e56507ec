import reflex as rx
from datetime import datetime

from .api import api
from .state import AuthState, DashboardState
from .utils import configure_logging

configure_logging()

BRAND = "PromptForge"


# --- Shared UI pieces ---

def brand(size: str = "6") -> rx.Component:
    return rx.link(
        rx.hstack(
            rx.icon("sparkles", size=28, color=rx.color("accent", 9)),
            rx.heading(BRAND, size=size, weight="bold"),
            align="center",
            spacing="2",
        ),
        href="/",
        underline="none",
        color="inherit",
    )


def feature_card(icon: str, title: str, description: str) -> rx.Component:
    return rx.card(
        rx.vstack(
            rx.icon(icon, size=24, color=rx.color("accent", 9)),
            rx.heading(title, size="4"),
            rx.text(description, color_scheme="gray"),
            spacing="2",
        ),
        class_name="transition-transform duration-300 hover:-translate-y-2",
        width="100%",
    )


def footer(text: str) -> rx.Component:
    return rx.box(
        rx.divider(),
        rx.center(rx.text(text, size="2", color_scheme="gray"), padding_y="2em"),
        width="100%",
        margin_top="4em",
    )


# --- Landing ---

def landing() -> rx.Component:
    return rx.container(
        rx.hstack(
            brand(),
            rx.spacer(),
            rx.link(rx.button("About", variant="ghost"), href="/about"),
            rx.link(rx.button("Sign In", variant="outline"), href="/auth"),
            width="100%",
            padding_y="1.5em",
            align="center",
        ),
        rx.vstack(
            rx.badge("✨ AI-Powered Prompt Generation", radius="full", size="2"),
            rx.heading("Transform Ideas Into", size="9", align="center"),
            rx.heading("Perfect AI Prompts", size="9", align="center", color=rx.color("accent", 10)),
            rx.text(
                "Generate professional, detailed prompts from your simple ideas. "
                "Save time and get better results from AI tools.",
                size="5",
                color_scheme="gray",
                align="center",
                max_width="40em",
            ),
            rx.hstack(
                rx.link(
                    rx.button("Get Started Free", rx.icon("arrow_right"), size="3"),
                    href="/auth",
                ),
                rx.link(rx.button("View Examples", size="3", variant="outline"), href="/about"),
                spacing="4",
                padding_top="1em",
            ),
            align="center",
            spacing="5",
            padding_top="5em",
        ),
        rx.grid(
            feature_card("zap", "Instant Generation", "Turn your rough ideas into detailed, structured prompts in seconds"),
            feature_card("sparkles", "Smart Enhancement", "AI-powered refinement adds context, clarity, and structure automatically"),
            feature_card("shield", "Save & Share", "Keep your prompts organized and share them with your team easily"),
            columns=rx.breakpoints(initial="1", md="3"),
            spacing="6",
            margin_top="8em",
        ),
        footer(f"© {datetime.now().year} {BRAND}. All rights reserved."),
        size="4",
    )


# --- Auth ---

def login_form() -> rx.Component:
    return rx.form.root(
        rx.vstack(
            rx.text("Email", size="2", weight="medium"),
            rx.input(placeholder="your.email@example.com", type="email", name="email", width="100%"),
            rx.text("Password", size="2", weight="medium"),
            rx.input(placeholder="••••••••", type="password", name="password", width="100%"),
            rx.button(
                rx.cond(AuthState.is_loading, "Signing in...", "Sign In"),
                type="submit",
                loading=AuthState.is_loading,
                width="100%",
            ),
            spacing="3",
            width="100%",
        ),
        on_submit=AuthState.handle_login,
        reset_on_submit=False,
    )


def signup_form() -> rx.Component:
    return rx.form.root(
        rx.vstack(
            rx.text("Full Name", size="2", weight="medium"),
            rx.input(placeholder="John Doe", name="name", width="100%"),
            rx.text("Email", size="2", weight="medium"),
            rx.input(placeholder="your.email@example.com", type="email", name="email", width="100%"),
            rx.text("Password", size="2", weight="medium"),
            rx.input(placeholder="••••••••", type="password", name="password", width="100%"),
            rx.text("Must be at least 6 characters long", size="1", color_scheme="gray"),
            rx.button(
                rx.cond(AuthState.is_loading, "Creating account...", "Create Account"),
                type="submit",
                loading=AuthState.is_loading,
                width="100%",
            ),
            spacing="3",
            width="100%",
        ),
        on_submit=AuthState.handle_signup,
        reset_on_submit=False,
    )


def auth_page() -> rx.Component:
    return rx.center(
        rx.vstack(
            rx.center(brand(size="7"), width="100%"),
            rx.text("Welcome back! Please sign in to continue", color_scheme="gray", align="center", width="100%"),
            rx.card(
                rx.tabs.root(
                    rx.tabs.list(
                        rx.tabs.trigger("Login", value="login"),
                        rx.tabs.trigger("Sign Up", value="signup"),
                    ),
                    rx.tabs.content(login_form(), value="login", padding_top="1em"),
                    rx.tabs.content(signup_form(), value="signup", padding_top="1em"),
                    default_value="login",
                ),
                width="100%",
            ),
            rx.text(
                "By continuing, you agree to our Terms of Service and Privacy Policy",
                size="2",
                color_scheme="gray",
                align="center",
                width="100%",
            ),
            spacing="4",
            width="100%",
            max_width="28em",
        ),
        min_height="100vh",
        padding="1em",
    )


# --- Dashboard ---

def recent_prompt_card(prompt: dict) -> rx.Component:
    return rx.card(
        rx.vstack(
            rx.text("Idea:", size="1", color_scheme="gray"),
            rx.text(prompt["user_idea"], size="2", weight="medium", class_name="line-clamp-2"),
            rx.text("Prompt:", size="1", color_scheme="gray"),
            rx.text(prompt["generated_prompt"], size="2", class_name="line-clamp-3"),
            rx.hstack(
                rx.icon_button(
                    rx.icon("copy", size=14),
                    size="1",
                    variant="ghost",
                    on_click=DashboardState.copy_prompt(prompt["generated_prompt"]),
                ),
                rx.icon_button(
                    rx.icon("share_2", size=14),
                    size="1",
                    variant="ghost",
                    on_click=DashboardState.share_prompt(prompt["generated_prompt"]),
                ),
                rx.spacer(),
                rx.icon_button(
                    rx.icon("trash_2", size=14),
                    size="1",
                    variant="ghost",
                    color_scheme="red",
                    on_click=DashboardState.handle_delete(prompt["id"]),
                ),
                width="100%",
            ),
            spacing="2",
            width="100%",
        ),
        width="100%",
    )


def generated_prompt_card() -> rx.Component:
    return rx.card(
        rx.vstack(
            rx.heading("Generated Prompt", size="5"),
            rx.text("Your enhanced AI-ready prompt", size="2", color_scheme="gray"),
            # Rendered as plain text, never as markup
            rx.box(
                rx.text(DashboardState.generated_prompt, size="2", white_space="pre-wrap"),
                background_color=rx.color("gray", 3),
                border_radius="8px",
                padding="1em",
                width="100%",
            ),
            rx.hstack(
                rx.button(
                    rx.icon("copy", size=16), "Copy",
                    variant="outline",
                    flex="1",
                    on_click=DashboardState.copy_prompt(DashboardState.generated_prompt),
                ),
                rx.button(
                    rx.icon("share_2", size=16), "Share",
                    variant="outline",
                    flex="1",
                    on_click=DashboardState.share_prompt(DashboardState.generated_prompt),
                ),
                width="100%",
            ),
            spacing="3",
            width="100%",
        ),
        width="100%",
    )


def dashboard() -> rx.Component:
    return rx.box(
        rx.hstack(
            brand(),
            rx.spacer(),
            rx.text("Welcome, ", DashboardState.user_name, "!", size="2", color_scheme="gray"),
            rx.icon_button(rx.icon("log_out"), variant="ghost", on_click=DashboardState.handle_logout),
            align="center",
            padding="1em 2em",
            border_bottom=f"1px solid {rx.color('gray', 5)}",
            width="100%",
        ),
        rx.container(
            rx.grid(
                rx.vstack(
                    rx.card(
                        rx.vstack(
                            rx.heading("Generate Your Prompt", size="5"),
                            rx.text(
                                "Enter your idea and let AI create a detailed prompt for you",
                                size="2",
                                color_scheme="gray",
                            ),
                            rx.text("Your Idea", size="2", weight="medium"),
                            rx.text_area(
                                placeholder="Example: Create a marketing campaign for eco-friendly products...",
                                value=DashboardState.user_idea,
                                on_change=DashboardState.set_user_idea,
                                min_height="150px",
                                width="100%",
                            ),
                            rx.button(
                                rx.cond(
                                    DashboardState.is_loading,
                                    rx.text("Generating..."),
                                    rx.hstack(rx.icon("sparkles", size=16), rx.text("Generate Prompt"), align="center"),
                                ),
                                on_click=DashboardState.handle_generate_prompt,
                                disabled=DashboardState.is_loading,
                                width="100%",
                            ),
                            spacing="3",
                            width="100%",
                        ),
                        width="100%",
                    ),
                    rx.cond(DashboardState.generated_prompt != "", generated_prompt_card(), rx.fragment()),
                    spacing="5",
                    width="100%",
                ),
                rx.card(
                    rx.vstack(
                        rx.heading("Recent Prompts", size="5"),
                        rx.text("Your previously generated prompts", size="2", color_scheme="gray"),
                        rx.cond(
                            DashboardState.recent_prompts.length() > 0,
                            rx.vstack(
                                rx.foreach(DashboardState.recent_prompts, recent_prompt_card),
                                spacing="3",
                                width="100%",
                            ),
                            rx.center(
                                rx.text("No prompts yet. Generate your first one!", color_scheme="gray"),
                                padding_y="2em",
                                width="100%",
                            ),
                        ),
                        spacing="3",
                        width="100%",
                    ),
                    width="100%",
                ),
                columns=rx.breakpoints(initial="1", lg="2"),
                spacing="6",
                width="100%",
            ),
            size="4",
            padding_y="2em",
        ),
    )


# --- About ---

ABOUT_FEATURES = [
    ("sparkles", "AI-Powered", "Intelligent prompt generation using advanced algorithms"),
    ("code", "Modern Stack", "Built with Python, Reflex, and Supabase"),
    ("rocket", "Fast & Reliable", "Optimized performance with real-time updates"),
    ("heart", "User-Focused", "Designed with simplicity and ease of use in mind"),
]

ABOUT_STATS = [
    ("2025", "Established"),
    ("1000+", "Prompts Generated"),
    ("100%", "Free to Use"),
    ("24/7", "Available"),
]


def stat_block(value: str, label: str) -> rx.Component:
    return rx.vstack(
        rx.heading(value, size="8", color=rx.color("accent", 10)),
        rx.text(label, size="2", color_scheme="gray"),
        align="center",
        spacing="1",
    )


def about() -> rx.Component:
    return rx.container(
        rx.hstack(
            brand(),
            rx.spacer(),
            rx.link(rx.button(rx.icon("house", size=16), "Home", variant="ghost"), href="/"),
            width="100%",
            padding_y="1.5em",
            align="center",
        ),
        rx.vstack(
            rx.icon("sparkles", size=64, color=rx.color("accent", 9)),
            rx.heading(f"About {BRAND}", size="9", align="center"),
            rx.text(
                "Transforming ideas into perfect AI prompts with the power of intelligence and simplicity",
                size="5",
                color_scheme="gray",
                align="center",
                max_width="40em",
            ),
            align="center",
            spacing="4",
            padding_y="4em",
        ),
        rx.grid(
            *[stat_block(value, label) for value, label in ABOUT_STATS],
            columns=rx.breakpoints(initial="2", md="4"),
            spacing="6",
        ),
        rx.grid(
            *[feature_card(icon, title, description) for icon, title, description in ABOUT_FEATURES],
            columns=rx.breakpoints(initial="1", sm="2", lg="4"),
            spacing="5",
            margin_top="4em",
        ),
        rx.center(
            rx.link(rx.button("Start Creating", rx.icon("arrow_right"), size="3"), href="/auth"),
            padding_top="4em",
        ),
        footer(f"© 2025 {BRAND}. All rights reserved."),
        size="4",
    )


# The generate-prompt endpoint is served by the same backend as the pages.
app = rx.App(
    api_transformer=api,
    theme=rx.theme(appearance="light", accent_color="indigo"),
)
app.add_page(landing, route="/", title=f"{BRAND} - Transform Ideas Into Perfect AI Prompts")
app.add_page(auth_page, route="/auth", title=f"Sign In - {BRAND}", on_load=AuthState.check_session)
app.add_page(dashboard, route="/dashboard", title=f"Dashboard - {BRAND}", on_load=DashboardState.load_dashboard)
app.add_page(about, route="/about", title=f"About - {BRAND}")
