# ui/dashboard.py
import sys, os
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
import streamlit as st
import pandas as pd
from logger import log_info, setup_logging
from matching.enrich import enrich_jobs
from matching.llm_xai import XAIClient
from schemas import Education, JobSearchParams, Preferences, UserProfile
from settings import load_config
from sources.adzuna import AdzunaClient, COUNTRY_NAMES, format_salary, is_supported_country
from ui.formatting import country_label, match_badge, parse_csv

# -------------------- CONFIG --------------------
st.set_page_config(page_title="SmartJob", page_icon="💼", layout="wide")


@st.cache_resource
def get_clients():
    config = load_config()
    setup_logging(config)
    return AdzunaClient(config.adzuna), XAIClient(config.xai)


adzuna, xai = get_clients()
log_info("App rendered")

st.title("💼 SmartJob")

# -------------------- SESSION STATE --------------------
if "profile" not in st.session_state:
    st.session_state.profile = UserProfile(
        skills=["React", "TypeScript", "JavaScript"],
        experience="3 years of frontend development",
        education=Education(level="Bachelor", field="Computer Science", institution="University of Nairobi"),
        preferences=Preferences(
            role="Frontend Developer",
            location="Nairobi",
            salary="KES 100,000 - 200,000",
            industry=["Technology", "E-commerce"],
            work_type="hybrid",
        ),
        languages=["English", "Swahili"],
    )

if "page" not in st.session_state:
    st.session_state.page = 1

if "saved_jobs" not in st.session_state:
    st.session_state.saved_jobs = {}

# Last feed fetch, keyed by the search that produced it
if "feed" not in st.session_state:
    st.session_state.feed = None

# -------------------- TABS --------------------
tab1, tab2, tab3 = st.tabs(["📊 Dashboard", "🧾 Job Feed", "👤 Profile"])

# ==================== TAB 1: Dashboard ====================
with tab1:
    st.subheader("Dashboard")

    c1, c2, c3, c4 = st.columns(4)
    c1.metric("Total Applications", 25)
    c2.metric("Interviews", 5)
    c3.metric("Job Offers", 2)
    c4.metric("Response Rate", "28%")

    left, right = st.columns(2)
    with left:
        st.markdown("### Application Status")
        status = pd.DataFrame(
            {"Applications": [15, 5, 2, 3]},
            index=["Applied", "Interviews", "Offers", "Rejected"],
        )
        st.bar_chart(status)

    with right:
        st.markdown("### Recent Activity")
        activity = [
            ("Applied to", "Tech Corp", "Frontend Developer", "2025-04-09"),
            ("Interview scheduled with", "Design Studio", "UX Designer", "2025-04-08"),
            ("Received offer from", "Startup Inc", "Product Designer", "2025-04-07"),
        ]
        for action, company, role, date in activity:
            st.markdown(f"- {action} **{company}**")
            st.caption(f"{role} • {date}")

    saved = st.session_state.saved_jobs
    st.markdown(f"**🔖 Saved for later:** {len(saved)}")
    for job_id, title in saved.items():
        st.caption(f"• {title} ({job_id})")

# ==================== TAB 2: Job Feed ====================
with tab2:
    st.subheader("Job Feed")

    country = st.selectbox(
        "Country",
        options=list(COUNTRY_NAMES.keys()),
        index=list(COUNTRY_NAMES.keys()).index("za"),
        format_func=country_label,
    )
    supported = is_supported_country(country)

    category = ""
    if supported:
        categories = adzuna.get_categories(country)
        options = {"All Categories": ""}
        options.update({c.label: c.tag for c in categories})
        category = options[st.selectbox("Category", options=list(options.keys()))]

    with st.form("search_form"):
        col_what, col_where = st.columns(2)
        what = col_what.text_input("Search jobs...")
        where = col_where.text_input("Location...")
        submitted = st.form_submit_button("Search Jobs", disabled=not supported)

    if not supported:
        st.warning(
            f"Job listings for {COUNTRY_NAMES[country]} are coming soon! Currently, only South Africa is supported."
        )

    if submitted:
        st.session_state.page = 1

    params = JobSearchParams(
        what=what,
        where=where,
        country=country,
        category=category,
        page=st.session_state.page,
    )
    profile = st.session_state.profile
    feed_key = (params.model_dump_json(), profile.model_dump_json())

    feed = st.session_state.feed
    if supported and (feed is None or feed[0] != feed_key):
        with st.spinner("⏳ Fetching jobs and analyzing matches..."):
            try:
                result = adzuna.search_jobs(params)
                jobs = enrich_jobs(result.jobs, profile, xai.analyze_job_match)
                feed = (feed_key, jobs, result.total_jobs)
                st.session_state.feed = feed
            except Exception as e:
                st.error(f"❌ Failed to load jobs. Please try again later. ({e})")
                feed = None

    jobs, total_jobs = (feed[1], feed[2]) if supported and feed else ([], 0)

    if supported and not jobs:
        st.info("No jobs found. Try adjusting your search criteria.")

    for item in jobs:
        job, match = item.job, item.match
        with st.container(border=True):
            head, badge = st.columns([4, 1])
            head.markdown(f"### {job.title}")
            head.markdown(f"**{job.company.display_name}**")
            head.caption(f"📍 {job.location.display_name}")
            if match is not None:
                label, colour = match_badge(match.match_score)
                badge.markdown(f"#### :{colour}[{label}]")

            st.write(job.description)
            salary = format_salary(job, country)
            if salary:
                st.markdown(f":green[**{salary}**]")

            if match is not None:
                insights = match.local_market_insights
                st.markdown("**Local Market Insights**")
                st.markdown(
                    f"- Demand Level: **{insights.demand_level}**\n"
                    f"- Growth Potential: {insights.growth_potential}\n"
                    f"- Competition: {insights.local_competition}"
                )

                if match.skill_gaps:
                    st.markdown("**Skills to Develop:** " + " ".join(f"`{s}`" for s in match.skill_gaps))

                with st.expander("📚 View Learning Resources →"):
                    upskilling = match.upskilling_suggestions
                    for heading, items in (
                        ("Courses", upskilling.courses),
                        ("Certifications", upskilling.certifications),
                        ("Resources", upskilling.resources),
                    ):
                        st.markdown(f"**{heading}:**")
                        for entry in items or ["—"]:
                            st.markdown(f"- {entry}")
                    if match.recommendations:
                        st.markdown("**Recommendations:**")
                        for rec in match.recommendations:
                            st.markdown(f"- {rec}")

            save_col, apply_col = st.columns([1, 1])
            if save_col.button("🔖 Save for Later", key=f"save_{job.id}"):
                st.session_state.saved_jobs[job.id] = job.title
                st.success("✅ Saved!")
            if job.redirect_url:
                apply_col.link_button("Apply Now", job.redirect_url)

    # --- Pagination ---
    if total_jobs > 0:
        st.caption(f"Showing {len(jobs)} of {total_jobs} jobs")
        prev_col, next_col = st.columns(2)
        if prev_col.button("Previous", disabled=st.session_state.page == 1):
            st.session_state.page = max(1, st.session_state.page - 1)
            st.rerun()
        if next_col.button("Next", disabled=len(jobs) < params.results_per_page):
            st.session_state.page += 1
            st.rerun()

# ==================== TAB 3: Profile ====================
with tab3:
    st.subheader("Profile")
    profile = st.session_state.profile
    education = profile.education or Education()
    prefs = profile.preferences
    work_types = ["", "remote", "hybrid", "onsite"]

    with st.form("profile_form"):
        skills = st.text_input("Skills (comma-separated)", value=", ".join(profile.skills))
        experience = st.text_area("Experience", value=profile.experience, height=100)

        st.markdown("**🎓 Education**")
        level = st.text_input("Level", value=education.level or "")
        field = st.text_input("Field", value=education.field or "")
        institution = st.text_input("Institution", value=education.institution or "")

        st.markdown("**🎯 Job Preferences**")
        role = st.text_input("Desired Role", value=prefs.role or "")
        location = st.text_input("Location Preference", value=prefs.location or "")
        salary_pref = st.text_input("Salary Expectation", value=prefs.salary or "")
        industry = st.text_input("Industry Interests (comma-separated)", value=", ".join(prefs.industry or []))
        work_type = st.selectbox(
            "Work Type",
            options=work_types,
            index=work_types.index(prefs.work_type or ""),
            format_func=lambda w: w.capitalize() if w else "Any",
        )
        languages = st.text_input("Languages (comma-separated)", value=", ".join(profile.languages or []))
        saved_profile = st.form_submit_button("Save Profile")

    if saved_profile:
        has_education = any(v.strip() for v in (level, field, institution))
        st.session_state.profile = UserProfile(
            skills=parse_csv(skills),
            experience=experience.strip(),
            education=Education(
                level=level.strip() or None,
                field=field.strip() or None,
                institution=institution.strip() or None,
            ) if has_education else None,
            preferences=Preferences(
                role=role.strip() or None,
                location=location.strip() or None,
                salary=salary_pref.strip() or None,
                industry=parse_csv(industry) or None,
                work_type=work_type or None,
            ),
            languages=parse_csv(languages) or None,
        )
        st.success("✅ Profile saved! The job feed will re-run its analysis with it.")
