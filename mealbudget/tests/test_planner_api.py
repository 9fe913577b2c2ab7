import unittest
from fastapi.testclient import TestClient
from mealbudget.api.api_run import app
from mealbudget.api.deps import get_planner, get_recorder
from mealbudget.events.web_observers import EventRecorder
from mealbudget.logic.state.planner_state import PlannerStateManager


class PlannerAPITestCase(unittest.TestCase):
    """Each test gets a fresh in-memory planner injected into the app."""

    @classmethod
    def setUpClass(cls):
        cls.client = TestClient(app)

    def setUp(self):
        self.planner = PlannerStateManager.from_repository()
        self.recorder = EventRecorder()
        self.recorder.start(self.planner.event_bus)
        app.dependency_overrides[get_planner] = lambda: self.planner
        app.dependency_overrides[get_recorder] = lambda: self.recorder

    def tearDown(self):
        app.dependency_overrides.clear()


class TestPlanAPI(PlannerAPITestCase):

    def test_empty_plan(self):
        resp = self.client.get('/api/plan')
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(data['expense_total'], 0)
        self.assertEqual(len(data['plan']), 7)
        self.assertIsNone(data['plan']['Monday']['breakfast'])

    def test_assign_and_clear(self):
        resp = self.client.put('/api/plan/Monday/breakfast', json={'recipe_id': 1})
        self.assertEqual(resp.status_code, 200)
        resp = self.client.put('/api/plan/Monday/lunch', json={'recipe_id': 2})
        data = resp.json()
        self.assertAlmostEqual(data['expense_total'], 14.25)
        self.assertEqual(data['expense_total_formatted'], '$14.25')
        self.assertEqual(data['plan']['Monday']['lunch']['name'], 'Chicken Salad')

        shopping = self.client.get('/api/shopping-list').json()
        names = [i['name'] for i in shopping['items']]
        self.assertIn('avocado', names)
        self.assertNotIn('olive oil', names)

        data = self.client.delete('/api/plan/Monday/breakfast').json()
        self.assertAlmostEqual(data['expense_total'], 8.75)
        names = [i['name'] for i in self.client.get('/api/shopping-list').json()['items']]
        self.assertNotIn('avocado', names)

    def test_invalid_slot(self):
        resp = self.client.put('/api/plan/Funday/lunch', json={'recipe_id': 2})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()['error'], 'InvalidSlotError')
        self.assertTrue(self.planner.plan.is_empty())

    def test_unknown_recipe(self):
        resp = self.client.put('/api/plan/Monday/lunch', json={'recipe_id': 404})
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json()['error'], 'NotFoundError')

    def test_missing_body(self):
        self.assertEqual(self.client.put('/api/plan/Monday/lunch', json={}).status_code, 422)

    def test_reset(self):
        self.client.put('/api/plan/Friday/dinner', json={'recipe_id': 3})
        data = self.client.post('/api/plan/reset').json()
        self.assertEqual(data['expense_total'], 0)

    def test_plan_pdf(self):
        resp = self.client.get('/api/plan/pdf')
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.headers['content-type'], 'application/pdf')


class TestShoppingAndPantryAPI(PlannerAPITestCase):

    def setUp(self):
        super().setUp()
        self.planner.assign_recipe_id("Monday", "lunch", 2)

    def test_toggle_item(self):
        data = self.client.post('/api/shopping-list/toggle', json={'name': 'tomato'}).json()
        self.assertEqual(data['checked'], 1)
        self.assertTrue(next(i for i in data['items'] if i['name'] == 'tomato')['checked'])

    def test_toggle_unknown_item(self):
        resp = self.client.post('/api/shopping-list/toggle', json={'name': 'caviar'})
        self.assertEqual(resp.status_code, 404)

    def test_add_pantry_item_updates_shopping_list(self):
        resp = self.client.post('/api/pantry', json={'item': 'tomato'})
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertTrue(data['added'])
        self.assertIn('tomato', data['items'])
        self.assertNotIn('tomato', [i['name'] for i in data['shopping_list']])

    def test_add_existing_pantry_item(self):
        data = self.client.post('/api/pantry', json={'item': 'bread'}).json()
        self.assertFalse(data['added'])
        self.assertEqual(data['items'].count('bread'), 1)

    def test_add_blank_pantry_item(self):
        resp = self.client.post('/api/pantry', json={'item': '   '})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()['error'], 'InvalidInputError')

    def test_remove_pantry_item(self):
        data = self.client.delete('/api/pantry/olive oil').json()
        self.assertTrue(data['removed'])
        self.assertIn('olive oil', [i['name'] for i in data['shopping_list']])

    def test_remove_pantry_item_with_slash(self):
        self.client.post('/api/pantry', json={'item': 'salt/pepper'})
        resp = self.client.delete('/api/pantry/salt/pepper')
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertTrue(data['removed'])
        self.assertNotIn('salt/pepper', data['items'])

    def test_shopping_pdf(self):
        resp = self.client.get('/api/shopping-list/pdf')
        self.assertEqual(resp.status_code, 200)
        self.assertTrue(resp.content.startswith(b'%PDF'))


class TestRecipesAPI(PlannerAPITestCase):

    def test_search(self):
        data = self.client.get('/api/recipes', params={'q': 'lettuce'}).json()
        self.assertEqual({r['name'] for r in data['recipes']}, {'Chicken Salad', 'Tuna Sandwich'})

    def test_search_empty_query_returns_catalog(self):
        self.assertEqual(self.client.get('/api/recipes').json()['count'], 6)

    def test_meal_type_filter(self):
        data = self.client.get('/api/recipes', params={'type': 'dinner'}).json()
        self.assertEqual({r['name'] for r in data['recipes']}, {'Spaghetti Bolognese', 'Vegetable Stir Fry'})
        self.assertEqual(self.client.get('/api/recipes', params={'type': 'supper'}).status_code, 400)

    def test_favorites_and_toggle(self):
        names = {r['name'] for r in self.client.get('/api/recipes/favorites').json()['recipes']}
        self.assertEqual(names, {'Avocado Toast', 'Spaghetti Bolognese', 'Vegetable Stir Fry'})
        data = self.client.post('/api/recipes/1/favorite').json()
        self.assertFalse(data['recipe']['favorite'])
        self.assertEqual(self.client.get('/api/recipes/favorites').json()['count'], 2)

    def test_toggle_unknown_favorite(self):
        resp = self.client.post('/api/recipes/999/favorite')
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(self.client.get('/api/recipes/favorites').json()['count'], 3)

    def test_suggestions(self):
        data = self.client.get('/api/recipes/suggestions').json()
        by_name = {r['name']: r for r in data['recipes']}
        # Starter pantry overlaps every recipe except the yogurt bowl
        self.assertNotIn('Greek Yogurt with Berries', by_name)
        self.assertEqual((by_name['Avocado Toast']['owned'], by_name['Avocado Toast']['total']), (4, 5))

    def test_ready_to_cook(self):
        self.client.post('/api/pantry', json={'item': 'avocado'})
        names = [r['name'] for r in self.client.get('/api/recipes/ready').json()['recipes']]
        self.assertEqual(names, ['Avocado Toast'])
        suggestions = [r['name'] for r in self.client.get('/api/recipes/suggestions').json()['recipes']]
        self.assertNotIn('Avocado Toast', suggestions)


class TestBudgetAPI(PlannerAPITestCase):

    def test_default_budget(self):
        data = self.client.get('/api/budget').json()
        self.assertEqual(data['budget'], 400)
        self.assertEqual(data['percent_used'], 0)

    def test_set_budget(self):
        self.planner.assign_recipe_id("Monday", "dinner", 3)
        data = self.client.put('/api/budget', json={'amount': 10}).json()
        self.assertEqual(data['budget'], 10)
        self.assertTrue(data['over_budget'])
        self.assertEqual(data['percent_used'], 100)

    def test_negative_budget(self):
        resp = self.client.put('/api/budget', json={'amount': -5})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(self.planner.budget, 400)

    def test_history(self):
        data = self.client.get('/api/budget/history').json()
        self.assertEqual(len(data['bars']), 8)
        self.assertEqual(data['bars'][0]['label'], 'W1')
        self.assertEqual(data['ticks'], [120, 90, 60, 30, 0])


class TestEventsAPI(PlannerAPITestCase):

    def test_poll_events(self):
        self.client.put('/api/plan/Monday/lunch', json={'recipe_id': 2})
        data = self.client.get('/api/events').json()
        types = [e['type'] for e in data['events']]
        self.assertEqual(types, ['plan.changed', 'shopping_list.recomputed', 'expenses.recomputed'])
        cursor = data['next_cursor']
        self.client.post('/api/pantry', json={'item': 'tomato'})
        newer = self.client.get('/api/events', params={'since': cursor}).json()['events']
        self.assertEqual([e['type'] for e in newer], ['pantry.changed', 'shopping_list.recomputed'])
