"List a few people, then add and remove an email address for the first one."
import pcoapi

# Credentials come from PCO_API_TOKEN and PCO_API_SECRET, or from
# PCO_API_ACCESS_TOKEN. Don't put real secrets in source code.
api = pcoapi.Endpoint.from_environment()

people = api.people.v2.people.get({'per_page': '5', 'order': 'last_name'})
for person in people['data']:
    print(person['id'], person['attributes']['name'])

if people['data']:
    person_id = people['data'][0]['id']
    emails = api.people.v2.people[person_id].emails
    email = emails.post({
        'data': {
            'type': 'Email',
            'attributes': {'address': 'pico@example.com', 'location': 'Home'}
        }
    })
    print('Added email', email['data']['id'])
    emails[email['data']['id']].delete()
    print('Removed it again.')

# Pagination is up to the caller: follow links.next until it is missing.
next_page = people.get('links', {}).get('next')
print('Next page:', next_page)
