"""
Streamlit UI for Movie Search.
Searches the movie database by title, offers a genre filter and a year sort,
and opens a detail view for the selected title.

Run UI:                streamlit run streamlit_app.py
"""

# Streamlit framework to build a simple interactive UI
import streamlit as st  # UI primitives

# Console logging
from loguru import logger  # console logger

# Pipeline modules: controller owns the session state, presentation formats it
from movie_search.config import configure_logging  # loguru sink setup
from movie_search.controller import SearchController  # search/enrich/detail stages
from movie_search.models import ALL_GENRES, ViewState  # view enums and sentinels
from movie_search.presentation import genre_options, poster_src, sort_label  # display helpers

# Number of cards per row in the result grid
GRID_COLUMNS = 3  # three posters side by side

# Configure Streamlit page (title and layout width)
st.set_page_config(page_title="Movie Search", layout="wide")  # wide layout


@st.cache_resource
def init_logging() -> bool:
	"""Install the loguru sink once per server process, not once per rerun."""
	configure_logging()  # apply LOG_LEVEL
	logger.info("[UI] Movie Search page started")  # startup log
	return True  # cached marker


def get_controller() -> SearchController:
	"""One controller per browser session, kept across reruns."""
	if "controller" not in st.session_state:
		st.session_state.controller = SearchController()  # fresh state for this session
	return st.session_state.controller  # existing controller


def on_genre_change():
	"""Push the selector value into the controller."""
	get_controller().set_genre(st.session_state.genre_select)  # new filter


def render_list(controller: SearchController):
	"""Search form, controls, error banner and result grid."""
	state = controller.state  # shorthand
	st.title("Movie Search")  # page header

	# Query form: Enter or the button submits
	with st.form("search_form"):
		c1, c2 = st.columns([5, 1])  # wide input, narrow button
		with c1:
			query = st.text_input(
				"Search", value=state.query, placeholder="Search for movies...", label_visibility="collapsed"
			)
		with c2:
			submitted = st.form_submit_button("Search", type="primary")

	if submitted:
		with st.spinner("Searching..."):  # covers search and genre enrichment
			controller.search(query)  # blank queries are ignored inside
		st.session_state.pop("genre_select", None)  # selector follows the controller's reset filter

	# Sort and genre controls only make sense with results
	if state.results:
		c1, c2 = st.columns([1, 1])  # two controls side by side
		with c1:
			st.button(sort_label(state.sort_order), on_click=controller.toggle_sort)  # flips asc/desc
		with c2:
			options = genre_options(state.genres)  # "all" first
			current = state.selected_genre if state.selected_genre in options else ALL_GENRES
			st.selectbox(
				"Genre",
				options,
				index=options.index(current),
				format_func=lambda g: "All Genres" if g == ALL_GENRES else g,
				key="genre_select",
				on_change=on_genre_change,
				label_visibility="collapsed",
			)

	if state.error:
		st.error(state.error)  # provider or transport failure

	# Result grid
	cards = controller.displayed()  # filtered + sorted on every render
	for start in range(0, len(cards), GRID_COLUMNS):
		cols = st.columns(GRID_COLUMNS)  # one row
		for col, movie in zip(cols, cards[start:start + GRID_COLUMNS]):
			with col:
				st.image(poster_src(movie.poster_url), width='stretch')  # poster or placeholder
				st.subheader(movie.title)  # title
				st.caption(f"Year: {movie.year}")  # year
				if st.button("Details", key=f"details_{movie.identifier}"):
					with st.spinner("Loading details..."):
						controller.select(movie.identifier)  # may switch to detail view
					st.rerun()  # redraw in the new view


def render_detail(controller: SearchController):
	"""Full record of the selected title with a way back."""
	movie = controller.state.selected_movie  # set by select()
	st.button("← Back to Results", on_click=controller.back)  # returns to the grid

	c1, c2 = st.columns([1, 1])  # poster left, facts right
	with c1:
		st.image(poster_src(movie.poster_url), width='stretch')  # poster or placeholder
	with c2:
		st.header(movie.title)  # title
		st.markdown(f"**Year:** {movie.year}")
		st.markdown(f"**Genre:** {movie.genre}")
		st.markdown(f"**Director:** {movie.director}")
		st.markdown(f"**Runtime:** {movie.runtime}")
		st.markdown(f"**IMDb Rating:** {movie.imdb_rating}")
		st.markdown("**Plot:**")
		st.write(movie.plot)  # synopsis


init_logging()  # once per process
controller = get_controller()  # per-session controller

if controller.state.view is ViewState.DETAIL and controller.state.selected_movie is not None:
	render_detail(controller)
else:
	render_list(controller)
